from __future__ import annotations

import logging
import sys
from typing import Sequence

from PySide6.QtWidgets import QApplication

from animal_list.cli import load_config, parse_args
from animal_list.core import (
    AnimalListController,
    AnimalRepository,
    ImageLibrary,
)
from animal_list.logging_config import setup_logging
from animal_list.ui import MainWindow

logger = logging.getLogger("animal_list.main")


def create_application(argv: Sequence[str]) -> QApplication:
    app = QApplication(list(argv))
    app.setApplicationName("Animal List")
    return app


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(argv if argv is not None else sys.argv)
    args, qt_args = parse_args(argv[1:])
    qt_argv = [argv[0], *qt_args]

    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)
    config = load_config(args)

    app = create_application(qt_argv)
    repository = AnimalRepository.with_seeds(config.catalog.seed_pairs())
    controller = AnimalListController(repository, config)
    window = MainWindow(controller, ImageLibrary.from_config(config.images))
    window.show()
    logger.info("Started with %d animals", len(repository))
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
