#!/usr/bin/env python3
"""
Play Snake in the overlay window.

Controls:
    Arrow Keys or WASD: Move the snake
    Click / touch: Move towards that side of the window
    R: Restart game
    ESC: Close
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from snake_overlay.utils.config_loader import load_config, validate_log_level
from snake_overlay.utils.logging_setup import setup_logging
from snake_overlay.visualization.overlay import SnakeOverlay


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake in an overlay window")
    parser.add_argument("--config", type=str, default=None, help="Path to config.yaml")
    parser.add_argument("--log-level", type=str, default=None, help="Override logging level (e.g. DEBUG)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        if args.log_level:
            config.logging.level = validate_log_level(args.log_level)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger = setup_logging(config.logging)

    overlay = SnakeOverlay(config)
    score = overlay.run()
    logger.info("Final score: %d", score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
