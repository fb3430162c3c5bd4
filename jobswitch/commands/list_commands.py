"""``jobswitch commands`` — show the chat commands the current settings would register."""
from __future__ import annotations

from shared.runtime_settings import load_runtime_settings
from jobswitch.runtime.host import HostError, build_host


def register(subparsers) -> None:
    p = subparsers.add_parser("commands", help="Show registered chat commands")
    p.add_argument("--help-text", action="store_true", help="Include each command's help message")
    p.set_defaults(func=run)


def run(args) -> int:
    try:
        host = build_host(load_runtime_settings())
    except HostError as e:
        print(f"  ERROR: {e}")
        return 1

    try:
        commands = sorted(host.switcher.registry.registered_commands)
        if not commands:
            print("No commands registered (check settings and catalogs).")
            return 0
        for command in commands:
            if args.help_text:
                reg = host.switcher.registry.registration_for(command)
                print(f"{command:<12} {reg.help_message if reg else ''}")
            else:
                print(command)
        print(f"\n{len(commands)} command(s)")
        return 0
    finally:
        host.close()
