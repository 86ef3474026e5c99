"""CLI entry point: python -m tycoon.mcp [company name]"""

from __future__ import annotations

import logging
import sys


def main() -> None:
    # stdout carries the MCP protocol
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    from tycoon.config import GameConfig
    from tycoon.mcp.server import create_server

    config = GameConfig()
    if len(sys.argv) > 1:
        config.company_name = " ".join(sys.argv[1:])

    errors = config.validate()
    if errors:
        for e in errors:
            print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    server = create_server(config)
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
