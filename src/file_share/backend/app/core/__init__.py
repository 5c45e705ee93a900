from file_share.backend.app.core.config import Settings, get_settings
from file_share.backend.app.core.deps import get_app_settings, get_file_storage, get_public_assets
from file_share.backend.app.core.logging import configure_logging

__all__ = ['Settings',
           'get_settings',
           'get_app_settings',
           'get_file_storage',
           'get_public_assets',
           'configure_logging']
