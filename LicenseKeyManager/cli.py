"""
Console entry point.

Commands are dispatched through an explicit table rather than Django's
management command discovery, so the installed script exposes exactly
these subcommands.
"""

import os
import sys

COMMANDS = {
    "generate": "licenses.management.commands.generate.Command",
    "verify": "licenses.management.commands.verify.Command",
    "hardware-id": "licenses.management.commands.hardware_id.Command",
}

USAGE = """usage: {prog} <command> [options]

License Key Manager CLI

commands:
  generate     Generate a new license key
  verify       Verify a license key
  hardware-id  Print this machine's hardware id

Run '{prog} <command> --help' for command options.
"""


def main(argv=None) -> int:
    """Run a license key command and return the process exit status."""
    argv = list(sys.argv if argv is None else argv)
    prog = os.path.basename(argv[0]) if argv else "license-key"
    args = argv[1:]

    if not args or args[0] in ("-h", "--help"):
        sys.stdout.write(USAGE.format(prog=prog))
        return 0 if args else 2

    if args[0] == "--version":
        from LicenseKeyManager import __version__

        sys.stdout.write(f"{__version__}\n")
        return 0

    name = args[0]
    if name not in COMMANDS:
        sys.stderr.write(f"Unknown command: {name!r}\n")
        sys.stderr.write(USAGE.format(prog=prog))
        return 2

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "LicenseKeyManager.settings.prod")

    import django
    from django.utils.module_loading import import_string

    django.setup()

    command = import_string(COMMANDS[name])()
    # Exits non-zero itself on CommandError
    command.run_from_argv([prog, name, *args[1:]])
    return 0


if __name__ == "__main__":
    sys.exit(main())
