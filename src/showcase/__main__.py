import logging

from .runner import main


def run() -> None:
    """Точка входа консольной команды: логирование только WARNING и выше."""
    logging.basicConfig(level=logging.WARNING)
    main()


if __name__ == "__main__":
    run()
