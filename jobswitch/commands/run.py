"""``jobswitch run`` — dispatch chat commands against a simulated host session.

The session file describes the host side: the current zone and the stored
loadout slots. Every action the switcher performs is printed.
"""
from __future__ import annotations

from shared.config import DEFAULT_SESSION_PATH
from shared.runtime_settings import load_runtime_settings
from jobswitch.runtime.host import HostError, build_host


def register(subparsers) -> None:
    p = subparsers.add_parser("run", help="Dispatch chat commands against a host session")
    p.add_argument("lines", nargs="+", help='Chat lines, e.g. "/pld" "/pj knight"')
    p.add_argument("--session", type=str, default=DEFAULT_SESSION_PATH, help="Session YAML (zone + loadouts)")
    p.add_argument("--zone", type=int, help="Override the session's current zone")
    p.set_defaults(func=run)


def run(args) -> int:
    try:
        host = build_host(load_runtime_settings(), session_path=args.session)
    except HostError as e:
        print(f"  ERROR: {e}")
        return 1

    if args.zone is not None:
        host.gateway.zone = args.zone

    failures = 0
    try:
        for line in args.lines:
            try:
                outcome = host.dispatch(line)
            except HostError as e:
                print(f"  ERROR: {e}")
                failures += 1
                continue
            if outcome.ok:
                print(f"  [OK] {outcome.message}")
            elif outcome.status == "error":
                failures += 1

        for action, value in host.gateway.actions:
            print(f"  action: {action}({value})")
    finally:
        host.close()
    return 1 if failures else 0
