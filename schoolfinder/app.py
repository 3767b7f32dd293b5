"""
Development server entry point
"""
import logging

from . import create_app
from .config import Config


def main():
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    Config.validate()

    app = create_app(Config)
    app.run(host='0.0.0.0', port=Config.PORT)


if __name__ == '__main__':
    main()
