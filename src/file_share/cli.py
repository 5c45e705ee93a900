from file_share.backend.app.core import configure_logging, get_settings
from file_share.backend.app.runner import run as api_run
from file_share.shared.proc import terminate_tree


def main():
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    api_proc = api_run(settings)
    try:
        # Wait until the server exits (or Ctrl+C in this terminal)
        api_proc.wait()
    except KeyboardInterrupt:
        print("\n Ctrl+C received, shutting down...")
    finally:
        terminate_tree(api_proc)


if __name__ == "__main__":
    main()
