from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional

from card_store import CardStore
from logging_config import setup_logging
from models import Card, DeviceDescriptor
from pa_cli import CommandError
from pa_streams import PulseStreamLookup
from resolver import ProfileResolver
from store_config import ConfigStore, log_level, pulse_client_name, set_pulse_client_name


logger = logging.getLogger(__name__)


def _print_cards(cards: Dict[str, Card]) -> None:
    for card in cards.values():
        print(f"Card #{card.index}")
        for p in card.profiles:
            print(f"\tprofile\t{p.name}\t{p.human_name}")
        for port in card.ports:
            print(f"\tport\t{port.name}\t{port.human_name}\t{', '.join(port.profiles)}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="List the card profiles that can enable an output port")
    parser.add_argument("port", nargs="?", default=None, help="Port name, e.g. analog-output-speaker")
    parser.add_argument("--stream", type=int, default=None, help="Index of the sink currently playing on the port")
    parser.add_argument("--list", action="store_true", help="Print all cards, profiles and ports")
    parser.add_argument(
        "--set-client-name",
        default=None,
        metavar="NAME",
        help="Store the client name used when connecting to the Pulse server",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (debug, info, warning, error). Can also use PROFILECHOOSER_LOG_LEVEL.",
    )
    args = parser.parse_args(argv)

    if not args.list and not args.port and args.set_client_name is None:
        parser.print_usage(sys.stderr)
        print("error: a port name, --list or --set-client-name is required", file=sys.stderr)
        return 2

    config = ConfigStore()
    cfg = config.load()
    setup_logging(args.log_level, config_level=log_level(cfg))

    if args.set_client_name is not None:
        if set_pulse_client_name(cfg, args.set_client_name):
            config.save(cfg)
            logger.info("client name set to %s in %s", pulse_client_name(cfg), config.file_path)
        if not args.list and not args.port:
            return 0

    store = CardStore()

    if args.list:
        try:
            store.refresh()
        except CommandError as e:
            print(str(e), file=sys.stderr)
            return 2
        _print_cards(store.get())
        return 0

    streams = PulseStreamLookup(pulse_client_name(cfg)) if args.stream is not None else None
    resolver = ProfileResolver(store, streams)
    try:
        profiles = resolver.resolve(DeviceDescriptor(port_name=args.port, stream_id=args.stream))
    except RuntimeError as e:
        # CommandError, or no connection to the Pulse server
        print(str(e), file=sys.stderr)
        return 2
    finally:
        if streams is not None:
            streams.close()

    if not profiles:
        logger.info("no profiles found for port %s", args.port)
        return 1

    for p in profiles:
        print(f"{p.name}\t{p.human_name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
