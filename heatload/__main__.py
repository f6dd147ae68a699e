"""Entry point of the heat load console: ``python -m heatload``."""
import sys

from .console import Console
from .logging import ModuleLogger
from .menu import HeatLoadApp

logger = ModuleLogger.get_logger(__name__)


def main() -> int:
    console = Console()
    app = HeatLoadApp(console)
    try:
        return app.run()
    except EOFError:
        # end of input ends the session the same way as the Exit option
        logger.info("input stream closed")
        console.write("\nGoodbye.\n")
        return 0
    except KeyboardInterrupt:
        console.write("\n")
        return 130


if __name__ == '__main__':
    sys.exit(main())
