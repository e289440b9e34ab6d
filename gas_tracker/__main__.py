"""Entry point for gas cost analysis"""
import argparse
import json
import logging
import os
import signal
import sys
import traceback
from decimal import Decimal
from typing import List, Optional

from gas_tracker.cancellation import CancellationToken
from gas_tracker.config import settings
from gas_tracker.errors import CancelledError
from gas_tracker.tracker import GasTracker

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)

CENTS = Decimal('0.01')

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Calculate total gas costs for an address with historical fiat pricing')
    parser.add_argument('address', nargs='?', default=settings.WALLET_ADDRESS,
                        help='Wallet address (defaults to WALLET_ADDRESS)')
    parser.add_argument('--output-dir', default=settings.OUTPUT_DIR, help='Directory for results.json')
    return parser.parse_args(argv)

def run(argv: Optional[List[str]] = None) -> None:
    """Calculate gas costs for one address and save the results."""
    args = parse_args(argv)
    cancel_token = CancellationToken()

    # First Ctrl+C stops the run between requests, a second one interrupts immediately
    def signal_handler(signum, frame) -> None:
        logger.info("Stopping gas cost analysis...")
        cancel_token.cancel("Interrupted by user")
        signal.signal(signal.SIGINT, original_handler)

    original_handler = signal.signal(signal.SIGINT, signal_handler)

    try:
        # Log config (excluding sensitive data)
        safe_config = settings.model_dump(exclude={'ALCHEMY_API_KEY'})
        logger.info("Using configuration:")
        logger.info(json.dumps(safe_config, indent=2))

        tracker = GasTracker(settings)
        result = tracker.run(args.address, progress=logger.info, cancel_token=cancel_token)

        # Save results
        os.makedirs(args.output_dir, exist_ok=True)
        output_path = os.path.join(args.output_dir, "results.json")
        with open(output_path, 'w') as f:
            json.dump(result.model_dump(mode='json'), f, indent=2)

        logger.info(
            f"Total gas cost: {result.total_cost_wei} wei "
            f"({result.total_cost_native} {result.symbol}, "
            f"{result.total_cost_fiat.quantize(CENTS)} USD) "
            f"over {result.statistics.total_transactions} transactions"
        )
        logger.info(f"Results written to {output_path}")

    except (CancelledError, KeyboardInterrupt):
        logger.error("Gas cost analysis interrupted")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Error during gas cost analysis: {e}")
        traceback.print_exc()
        sys.exit(1)
    finally:
        signal.signal(signal.SIGINT, original_handler)

if __name__ == "__main__":
    run()
