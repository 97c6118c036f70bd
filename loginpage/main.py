from __future__ import annotations

import argparse
import sys
import logging
from pathlib import Path

from .config import BASE_URL
from .smoke import LOGIN_PAGE_SCENARIO, SmokeTestFailure, chromium_installed, run_scenario

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Login page smoke test",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a locally running server
  python -m loginpage.main --base-url http://localhost:8080

  # Watch the browser, stop at the first failing check
  python -m loginpage.main --headed --slowmo 250 --fail-fast
        """
    )
    parser.add_argument(
        "--base-url",
        default=BASE_URL,
        help=f"Server base URL (default: {BASE_URL})"
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Run with a visible browser"
    )
    parser.add_argument(
        "--slowmo",
        type=int,
        default=0,
        help="Slow motion in milliseconds for debugging (default: 0)"
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first failing check instead of running them all"
    )
    parser.add_argument(
        "--artifacts",
        type=Path,
        default=None,
        help="Directory for the trace and failure screenshot"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose debug logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not chromium_installed():
        logger.error("Chromium is not installed for Playwright. Run: playwright install chromium")
        sys.exit(1)

    try:
        logger.info("=" * 70)
        logger.info("SMOKE TEST - Starting")
        logger.info("=" * 70)
        run_scenario(
            LOGIN_PAGE_SCENARIO,
            args.base_url,
            headed=args.headed,
            slow_mo_ms=args.slowmo,
            soft=not args.fail_fast,
            artifacts_dir=args.artifacts
        )
        logger.info("=" * 70)
        logger.info("✓ SMOKE TEST PASSED")
        logger.info("=" * 70)
        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Smoke test interrupted by user")
        sys.exit(130)

    except SmokeTestFailure as e:
        logger.error("=" * 70)
        logger.error("✗ SMOKE TEST FAILED")
        for line in str(e).splitlines():
            logger.error(line)
        logger.error("=" * 70)
        sys.exit(1)

    except Exception as e:
        logger.error(f"✗ SMOKE TEST ERROR: {type(e).__name__}: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
