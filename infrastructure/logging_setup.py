import logging
import sys


def configure_logging(level: str | int = "info") -> None:
    """
    Instala un handler de consola en el logger raíz.

    No hace nada si el raíz ya tiene handlers (p. ej. un --log-config de
    uvicorn o la captura de pytest).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
    logging.captureWarnings(True)
