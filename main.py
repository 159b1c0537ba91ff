from loguru import logger

from hierarchy_table.cli import app


def main() -> None:
    logger.debug("hierarchy-table starting")
    app()


if __name__ == "__main__":
    main()
