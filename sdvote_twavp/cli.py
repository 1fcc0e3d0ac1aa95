#!/usr/bin/env python3
"""
Command line entry point for the TWAVP strategies.

Examples:
  - Sampled heights
    sdvote-twavp blocks --current-block 19000000 --samples 5 --days 7

  - Score addresses
    sdvote-twavp score --strategy sdvote-balanceof-twavp-pool --chain-id 1 \\
        --options options.json --addresses 0x...,0x... [--snapshot 19000000]
"""

import argparse
import asyncio
from typing import Any, Dict, List, Optional

from rich.panel import Panel

from sdvote_twavp.commands.helpers import handle_command_error
from sdvote_twavp.commands.validation import (
    validate_chain_id,
    validate_eth_address,
    validate_snapshot,
)
from sdvote_twavp.shared.constants import TwavpConstants
from sdvote_twavp.shared.services.web3_service import Web3Service
from sdvote_twavp.strategies import STRATEGIES, get_strategy
from sdvote_twavp.twavp.blocks import compute_blocks
from sdvote_twavp.utils.formatters import (
    console,
    create_blocks_table,
    create_scores_table,
    generate_timestamped_filename,
    load_json,
    save_json_output,
)


def _parse_addresses(args: argparse.Namespace) -> List[str]:
    if args.addresses_file:
        raw = load_json(args.addresses_file)
        if not isinstance(raw, list):
            raise ValueError(
                f"{args.addresses_file} must contain a JSON list of addresses"
            )
    else:
        raw = [a.strip() for a in args.addresses.split(",") if a.strip()]

    if not raw:
        raise ValueError("At least one address is required")
    # Validate without rewriting, scores are keyed by the input strings
    for address in raw:
        validate_eth_address(address)
    return raw


def cmd_blocks(args: argparse.Namespace) -> None:
    blocks = compute_blocks(
        args.current_block, args.samples, args.days, args.seconds_per_block
    )
    console.print(Panel("Sampled Blocks", style="bold magenta"))
    console.print(create_blocks_table(blocks))


async def _score(
    args: argparse.Namespace,
    addresses: List[str],
    options: Dict[str, Any],
    snapshot: Any,
) -> Dict[str, float]:
    strategy = get_strategy(args.strategy)
    provider = Web3Service.get_instance(args.chain_id)
    return await strategy.strategy(
        args.space,
        args.chain_id,
        provider,
        addresses,
        options,
        snapshot,
    )


def cmd_score(args: argparse.Namespace) -> None:
    validate_chain_id(args.chain_id)
    addresses = _parse_addresses(args)
    snapshot = validate_snapshot(args.snapshot)
    options = load_json(args.options)
    if not isinstance(options, dict):
        raise ValueError(f"{args.options} must contain a JSON object")

    console.print(Panel(f"Scoring {args.strategy}", style="bold magenta"))
    scores = asyncio.run(_score(args, addresses, options, snapshot))
    console.print(create_scores_table(scores))

    if args.output is not None:
        filename = args.output or generate_timestamped_filename("scores")
        save_json_output(
            {
                "strategy": args.strategy,
                "chain_id": args.chain_id,
                "snapshot": args.snapshot,
                "scores": scores,
            },
            filename,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdvote-twavp",
        description="Time-weighted average voting power strategies",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # blocks
    p_blocks = sub.add_parser("blocks", help="Show the sampled block heights")
    p_blocks.add_argument("--current-block", type=int, required=True)
    p_blocks.add_argument("--samples", type=int, required=True)
    p_blocks.add_argument("--days", type=float, required=True)
    p_blocks.add_argument(
        "--seconds-per-block",
        type=float,
        default=TwavpConstants.DEFAULT_SECONDS_PER_BLOCK,
    )
    p_blocks.set_defaults(func=cmd_blocks)

    # score
    p_score = sub.add_parser("score", help="Compute voting power")
    p_score.add_argument(
        "--strategy", type=str, required=True, choices=sorted(STRATEGIES)
    )
    p_score.add_argument("--chain-id", type=int, default=1)
    p_score.add_argument(
        "--options", type=str, required=True, help="JSON options file"
    )
    group = p_score.add_mutually_exclusive_group(required=True)
    group.add_argument("--addresses", type=str, help="Comma-separated list")
    group.add_argument(
        "--addresses-file", type=str, help="JSON list of addresses"
    )
    p_score.add_argument(
        "--snapshot",
        type=str,
        default=TwavpConstants.LATEST,
        help="Block number or 'latest'",
    )
    p_score.add_argument("--space", type=str, default=None)
    p_score.add_argument(
        "--output",
        type=str,
        nargs="?",
        const="",
        default=None,
        help="Save scores as JSON (optional filename)",
    )
    p_score.set_defaults(func=cmd_score)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except Exception as e:
        handle_command_error(e)


if __name__ == "__main__":
    main()
