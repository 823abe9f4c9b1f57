"""Run the list server.

    python -m shoplists
"""

from shoplists.app import create_app
from shoplists.shared.config import load_config
from shoplists.shared.logging import logger


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"listening on port :{config.port}")
    app.run(host=config.host, port=config.port, threaded=True, use_reloader=False)


if __name__ == "__main__":
    main()
