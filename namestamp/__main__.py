import sys

from namestamp import obs, version
from namestamp.config import LOGGING, PATH
from namestamp.errors import StampError
from namestamp.obs import logger
from namestamp.stamper import stamp


def main():
    """

    Stamp the package version onto the `name` in `config.yml`, and report. Any failure is fatal with exit status 1.

    """
    obs.configure(LOGGING)
    logger.debug(f'Stamping "{PATH}" with version {version.__version__}...')

    try:
        result = stamp(PATH, version=version.__version__)
    except StampError as exception:
        msg = f'Failed to update {PATH}: {exception}'
        logger.error(msg)
        return 1

    logger.info(str(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
