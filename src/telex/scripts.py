# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse
import logging
import pathlib
import pprint
import sys

import trio

from .editor import TelexInput
from .guide import format_guide
from .keystreams import make_keystream
from .rules import DEFAULT_RULE_TABLE, Tier
from .settings import Settings


def _load_settings(path):
    return Settings() if path is None else Settings.load(path)


def _setup_logging(verbose: bool):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


async def type_text(text: str, settings: Settings) -> str:
    telex_input = TelexInput(settings)
    send_channel, receive_channel = trio.open_memory_channel(0)
    async with trio.open_nursery() as nursery, make_keystream(receive_channel, settings, telex_input) as keystream:

        async def feed():
            async with send_channel:
                await send_channel.send(text)

        nursery.start_soon(feed)
        async for _snapshot in keystream:
            pass
    return telex_input.text


type_parser = argparse.ArgumentParser(prog="telex-type", description="Type text through the Telex converter, one keystroke at a time.")
type_parser.add_argument("text", nargs="?", help="text to type; read from stdin if omitted")
type_parser.add_argument("--settings", type=pathlib.Path)
type_parser.add_argument("--verbose", action="store_true")


def type_cli(argv=None):
    args = type_parser.parse_args(argv)
    _setup_logging(args.verbose)
    settings = _load_settings(args.settings)
    text = args.text if args.text is not None else sys.stdin.read()
    print(trio.run(type_text, text, settings))
    return 0


rules_parser = argparse.ArgumentParser(prog="telex-rules", description="List the Telex rules in priority order.")
rules_parser.add_argument("--tier", choices=[tier.name for tier in Tier])
rules_parser.add_argument("--window", help="show only the rule that would fire for this window")


def list_rules(tier_name=None, window=None):
    if window is not None:
        match = DEFAULT_RULE_TABLE.select(window)
        return None if match is None else (match.rule.tier.name, match.rule.suffix, match.replacement)
    tiers = [Tier[tier_name]] if tier_name is not None else list(Tier)
    return {tier.name: [(rule.suffix, rule.replacement) for rule in DEFAULT_RULE_TABLE.by_tier(tier)] for tier in tiers}


def rules_cli(argv=None):
    args = rules_parser.parse_args(argv)
    pprint.pprint(list_rules(args.tier, args.window), sort_dicts=False)
    return 0


guide_parser = argparse.ArgumentParser(prog="telex-guide", description="Show how to type Vietnamese with Telex.")
guide_parser.add_argument("--settings", type=pathlib.Path)


def guide_cli(argv=None):
    args = guide_parser.parse_args(argv)
    print(format_guide(_load_settings(args.settings)))
    return 0
