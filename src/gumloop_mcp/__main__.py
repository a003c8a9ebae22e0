"""Console entry point: ``gumloop-mcp`` or ``python -m gumloop_mcp``."""

import asyncio
import sys

from .config import load_config
from .exceptions import ConfigurationError
from .logger import get_logger, setup_logging
from .server import serve


def main() -> None:
    setup_logging()
    try:
        config = load_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    get_logger().setLevel(config.log_level)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Fatal error in main(): {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
