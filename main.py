"""
SpaceTraders CLI: one subcommand per API call, printing the decoded payload as JSON.

Usage examples:
  python main.py register -u MY_AGENT -f COSMIC
  python main.py whoami
  python main.py waypoint list -t MARKETPLACE
  python main.py ship navigate MY_AGENT-1 X1-AB23-C4
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from enum import Enum

from api.errors import ApiError
from app.bootstrap import AppContext, build_app
from app.config import ConfigError, load_settings
from data.enums import ShipType, TradeSymbol, WaypointTraitSymbol
from data.models.common import ApiResponse
from data.models.survey import Survey
from data.models.waypoints import system_symbol_of
from data.storage import SessionFileError
from utils.serialize import to_jsonable
from utils.time import seconds_until

# Commands that work without a cached session
NO_SESSION_COMMANDS = {"register", "status", "logout"}


def _enum_arg(enum_cls: type[Enum]):
    def parse(value: str) -> Enum:
        try:
            return enum_cls(value.upper())
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid {enum_cls.__name__}: {value}")

    parse.__name__ = enum_cls.__name__
    return parse


def _survey_arg(value: str) -> Survey:
    try:
        return Survey.from_dict(json.loads(value))
    except (ValueError, KeyError, TypeError) as e:
        raise argparse.ArgumentTypeError(f"invalid survey JSON: {e}")


def _print_data(resp: ApiResponse) -> int:
    print(json.dumps(to_jsonable(resp.data), indent=2))
    if resp.meta:
        logging.info(f"Page {resp.meta.page} (limit {resp.meta.limit}, total {resp.meta.total})")
    return 0


# ---------- account ----------


def cmd_status(ctx: AppContext, args: argparse.Namespace) -> int:
    if ctx.session is None:
        print("You are not logged in. Register with: register -u <username>")
    else:
        print(f"You are logged in as {ctx.session.agent.symbol}")
    return 0


def cmd_register(ctx: AppContext, args: argparse.Namespace) -> int:
    logging.info(f"Registering {args.username} with faction {args.faction}")
    resp = ctx.client.agent.register(args.username, args.faction)
    ctx.store.save(resp.data.session())
    print(json.dumps(to_jsonable(resp.data.agent), indent=2))
    return 0


def cmd_whoami(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.agent.get())


def cmd_logout(ctx: AppContext, args: argparse.Namespace) -> int:
    if ctx.store.clear():
        print("Session removed")
    else:
        print("No session to remove")
    return 0


# ---------- contracts ----------


def cmd_contract_list(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.contracts.list(page=args.page, limit=args.limit))


def cmd_contract_get(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.contracts.get(args.contract_id))


def cmd_contract_accept(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.contracts.accept(args.contract_id))


def cmd_contract_deliver(ctx: AppContext, args: argparse.Namespace) -> int:
    resp = ctx.client.contracts.deliver(args.contract_id, args.ship, args.trade_symbol, args.units)
    return _print_data(resp)


def cmd_contract_fulfill(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.contracts.fulfill(args.contract_id))


# ---------- waypoints ----------


def cmd_waypoint_list(ctx: AppContext, args: argparse.Namespace) -> int:
    system = args.system or ctx.session.agent.system
    return _print_data(ctx.client.waypoints.list(system, args.trait, page=args.page, limit=args.limit))


def cmd_waypoint_get(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.waypoints.get(system_symbol_of(args.waypoint), args.waypoint))


def cmd_waypoint_market(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.waypoints.get_market(system_symbol_of(args.waypoint), args.waypoint))


def cmd_waypoint_shipyard(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.waypoints.get_shipyard(system_symbol_of(args.waypoint), args.waypoint))


# ---------- ships ----------


def cmd_ship_list(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.list_ships(page=args.page, limit=args.limit))


def cmd_ship_purchase(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.purchase_ship(args.ship_type, args.waypoint))


def cmd_ship_status(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.get_ship(args.ship))


def cmd_ship_nav(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.get_nav(args.ship))


def cmd_ship_orbit(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.orbit_ship(args.ship))


def cmd_ship_dock(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.dock_ship(args.ship))


def cmd_ship_navigate(ctx: AppContext, args: argparse.Namespace) -> int:
    resp = ctx.client.fleet.navigate_ship(args.ship, args.waypoint)
    route = resp.data.nav.route
    logging.info(f"{args.ship} arrives at {route.destination.symbol} in {seconds_until(route.arrival):.0f}s")
    return _print_data(resp)


def cmd_ship_refuel(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.refuel_ship(args.ship, args.units))


def cmd_ship_extract(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.extract(args.ship, args.survey))


def cmd_ship_survey(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.survey(args.ship))


def cmd_ship_cargo(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.get_cargo(args.ship))


def cmd_ship_sell(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.sell(args.ship, args.trade_symbol, args.units))


def cmd_ship_buy(ctx: AppContext, args: argparse.Namespace) -> int:
    return _print_data(ctx.client.fleet.purchase(args.ship, args.trade_symbol, args.units))


def _add_paging(p: argparse.ArgumentParser) -> None:
    p.add_argument("--page", type=int, default=None, help="Page number (server default: 1)")
    p.add_argument("--limit", type=int, default=None, help="Page size (server default: 10)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spacetraders", description="SpaceTraders command-line client")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("status", help="Show the cached login").set_defaults(handler=cmd_status)

    p_reg = sub.add_parser("register", help="Register a new agent and cache its token")
    p_reg.add_argument("-u", "--username", required=True, help="Agent call sign")
    p_reg.add_argument("-f", "--faction", default="COSMIC", help="Starting faction (default: COSMIC)")
    p_reg.set_defaults(handler=cmd_register)

    sub.add_parser("whoami", aliases=["who-am-i"], help="Fetch the agent profile").set_defaults(handler=cmd_whoami)
    sub.add_parser("logout", help="Forget the cached session").set_defaults(handler=cmd_logout)

    # contracts
    p_contract = sub.add_parser("contract", aliases=["contracts"], help="Contract operations")
    csub = p_contract.add_subparsers(dest="action", required=True)
    p = csub.add_parser("list", help="List contracts")
    _add_paging(p)
    p.set_defaults(handler=cmd_contract_list)
    for name, handler, help_text in (
        ("get", cmd_contract_get, "Show one contract"),
        ("accept", cmd_contract_accept, "Accept a contract"),
        ("fulfill", cmd_contract_fulfill, "Fulfill a completed contract"),
    ):
        p = csub.add_parser(name, help=help_text)
        p.add_argument("contract_id")
        p.set_defaults(handler=handler)
    p = csub.add_parser("deliver", help="Deliver cargo for a contract")
    p.add_argument("contract_id")
    p.add_argument("ship")
    p.add_argument("trade_symbol", type=_enum_arg(TradeSymbol))
    p.add_argument("units", type=int)
    p.set_defaults(handler=cmd_contract_deliver)

    # waypoints
    p_wp = sub.add_parser("waypoint", aliases=["waypoints"], help="Waypoint lookups")
    wsub = p_wp.add_subparsers(dest="action", required=True)
    p = wsub.add_parser("list", help="List waypoints in a system (default: HQ system)")
    p.add_argument("-t", "--trait", type=_enum_arg(WaypointTraitSymbol), default=None, help="Keep only waypoints with this trait")
    p.add_argument("--system", default=None, help="System symbol, e.g. X1-AB23")
    _add_paging(p)
    p.set_defaults(handler=cmd_waypoint_list)
    for name, handler, help_text in (
        ("get", cmd_waypoint_get, "Show one waypoint"),
        ("market", cmd_waypoint_market, "Show the market at a waypoint"),
        ("shipyard", cmd_waypoint_shipyard, "Show the shipyard at a waypoint"),
    ):
        p = wsub.add_parser(name, help=help_text)
        p.add_argument("waypoint", help="Waypoint symbol, e.g. X1-AB23-C4")
        p.set_defaults(handler=handler)

    # ships
    p_ship = sub.add_parser("ship", aliases=["ships"], help="Fleet operations")
    ssub = p_ship.add_subparsers(dest="action", required=True)
    p = ssub.add_parser("list", help="List your ships")
    _add_paging(p)
    p.set_defaults(handler=cmd_ship_list)
    p = ssub.add_parser("purchase", help="Buy a ship at a shipyard")
    p.add_argument("ship_type", type=_enum_arg(ShipType))
    p.add_argument("waypoint")
    p.set_defaults(handler=cmd_ship_purchase)
    for name, handler, help_text in (
        ("status", cmd_ship_status, "Show a ship"),
        ("nav", cmd_ship_nav, "Show a ship's navigation status"),
        ("orbit", cmd_ship_orbit, "Move a ship into orbit"),
        ("dock", cmd_ship_dock, "Dock a ship"),
        ("survey", cmd_ship_survey, "Survey the current waypoint"),
        ("cargo", cmd_ship_cargo, "Show a ship's cargo"),
    ):
        p = ssub.add_parser(name, help=help_text)
        p.add_argument("ship")
        p.set_defaults(handler=handler)
    p = ssub.add_parser("navigate", help="Fly to a waypoint in the current system")
    p.add_argument("ship")
    p.add_argument("waypoint")
    p.set_defaults(handler=cmd_ship_navigate)
    p = ssub.add_parser("refuel", help="Refuel at the docked market")
    p.add_argument("ship")
    p.add_argument("--units", type=int, default=None, help="Units of fuel (default: fill the tank)")
    p.set_defaults(handler=cmd_ship_refuel)
    p = ssub.add_parser("extract", help="Extract resources at the current waypoint")
    p.add_argument("ship")
    p.add_argument("--survey", type=_survey_arg, default=None, help="Survey JSON as printed by 'ship survey'")
    p.set_defaults(handler=cmd_ship_extract)
    for name, handler, help_text in (
        ("sell", cmd_ship_sell, "Sell cargo at the docked market"),
        ("buy", cmd_ship_buy, "Buy cargo at the docked market"),
    ):
        p = ssub.add_parser(name, help=help_text)
        p.add_argument("ship")
        p.add_argument("trade_symbol", type=_enum_arg(TradeSymbol))
        p.add_argument("units", type=int)
        p.set_defaults(handler=handler)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        ctx = build_app(settings)
    except SessionFileError as e:
        logging.error(f"Error: {e}")
        logging.error("Remove or fix the session file; it will not be replaced automatically.")
        return 1

    with ctx.client:
        if ctx.session is None and args.cmd not in NO_SESSION_COMMANDS:
            print("Please log in first: register -u <username>", file=sys.stderr)
            return 1
        try:
            return args.handler(ctx, args)
        except ApiError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    raise SystemExit(main())
