"""Simple CLI for checking relayer fee estimates locally"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from .core.chain_types import chain_id_to_name, normalize_to_chain_id
from .core.relayer import RelayerFeeEstimator
from .core.relayer.fees import requires_gas_price
from .logging_config import setup_logging
from .providers import CoingeckoProvider, EthereumGasProvider, RelayerRegistryProvider
from .types import FeeEstimateEnvelope


def print_envelope(envelope: FeeEstimateEnvelope, *, as_json: bool) -> None:
    """Print the estimate either as JSON or as a short summary"""
    if as_json:
        print(json.dumps(envelope.model_dump(mode="json", by_alias=True), indent=2))
        return

    if envelope.error:
        print(f"❌ {envelope.error}")
        return

    estimate = envelope.data
    if estimate is None:
        print("⏳ Estimate still pending")
        return

    if not estimate.is_relaying_available:
        print("⚠️  Relaying is unavailable right now")
        return
    if not estimate.is_relayable:
        print("⚠️  This token cannot be relayed")
        return

    print(f"Relayer fee: ${estimate.fee_fiat} USD")
    print(f"           = {estimate.fee_in_source_units} source tokens")
    if estimate.comparison_price_quote is not None:
        print(f"Destination native asset: ${estimate.comparison_price_quote:,.4f}")


async def cli_estimate(args: argparse.Namespace) -> int:
    """Run one estimation cycle and print the result"""
    origin_chain = normalize_to_chain_id(args.origin_chain)
    target_chain = normalize_to_chain_id(args.target_chain)

    registry_provider = RelayerRegistryProvider(url=args.registry_url)
    estimator = RelayerFeeEstimator(CoingeckoProvider())

    if not args.json:
        print(
            f"🔍 Estimating relay fee {chain_id_to_name(origin_chain)} → "
            f"{chain_id_to_name(target_chain)} for {args.origin_asset}..."
        )

    try:
        gas_price: Optional[float] = args.gas_price
        if gas_price is None and requires_gas_price(target_chain):
            gas_price = await EthereumGasProvider(rpc_url=args.rpc_url).get_gas_price()

        estimator.set_gas_price(gas_price)
        estimator.set_source_decimals(args.decimals)
        estimator.set_registry(await registry_provider.fetch_registry())
        estimator.set_transfer(origin_chain, args.origin_asset, target_chain)

        await estimator.wait_settled()
        envelope = estimator.envelope()
    finally:
        await estimator.aclose()

    print_envelope(envelope, as_json=args.json)
    return 1 if envelope.error else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Relayer fee estimation CLI")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    parser.add_argument(
        "--log-format",
        choices=("auto", "json", "console"),
        default=None,
        help="Override LOG_FORMAT",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    estimate = subparsers.add_parser("estimate", help="Estimate the relayer fee for a transfer")
    estimate.add_argument("--origin-chain", required=True, help="Origin chain name or Wormhole chain id")
    estimate.add_argument("--origin-asset", required=True, help="Origin token address")
    estimate.add_argument("--target-chain", required=True, help="Destination chain name or Wormhole chain id")
    estimate.add_argument("--decimals", type=int, default=None, help="Decimals of the source token")
    estimate.add_argument("--gas-price", type=float, default=None, help="Destination gas price in gwei")
    estimate.add_argument("--registry-url", default=None, help="Override RELAYER_REGISTRY_URL")
    estimate.add_argument("--rpc-url", default=None, help="Override ETHEREUM_RPC_URL")
    estimate.add_argument("--json", action="store_true", help="Print the raw result envelope")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    try:
        return asyncio.run(cli_estimate(args))
    except ValueError as e:
        print(f"❌ Error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
