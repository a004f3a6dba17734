import argparse
import json
import os
import sys

from .catalog import get_builtin_registry
from .exceptions import SignatureError
from .utils import SignatureArtifactEncoder, TerminalColors, flag_names


def _print_list(registry):
    for signature in registry.signatures():
        print(signature.type_signature)
    print(f"\n{TerminalColors.CYAN}--- {len(registry)} functions, {len(registry.signatures())} overloads ---{TerminalColors.RESET}")


def _print_overloads(registry, name):
    overloads = registry.get_overloads(name)
    for i, signature in enumerate(overloads, start=1):
        print(f"{TerminalColors.GREEN}[{i}/{len(overloads)}] {signature.type_signature}{TerminalColors.RESET}")
        if signature.description:
            print(f"    {signature.description}")
        for param in signature.fixed_parameters:
            marker = "" if param.required else " (optional)"
            print(f"    - {param.name}: {param.type}{marker}  {param.description}")
        var = signature.variable_parameter
        if var is not None:
            print(f"    - {var.display_name(0)}, {var.display_name(1)}, ...: {var.element_type} (at least {var.minimum_count})  {var.description}")
        flags = flag_names(signature.flags)
        if flags:
            print(f"    flags: {', '.join(flags)}")


def _dump(registry, output_file):
    if output_file is None:
        json.dump(registry.signatures(), sys.stdout, indent=2, cls=SignatureArtifactEncoder)
        print()
        return

    output_file_path = os.path.abspath(output_file)
    # Ensure the directory exists before writing
    os.makedirs(os.path.dirname(output_file_path), exist_ok=True)
    with open(output_file_path, "w", encoding="utf-8") as f:
        json.dump(registry.signatures(), f, indent=2, cls=SignatureArtifactEncoder)
    print(f"{TerminalColors.GREEN}--- Signature catalog written to {output_file_path} ---{TerminalColors.RESET}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Inspect the built-in ValuaScript function signatures.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Print the signature of every built-in overload.")

    show_parser = subparsers.add_parser("show", help="Print the overload set of a single function.")
    show_parser.add_argument("name", help="The function name, e.g. 'GetElement'.")

    dump_parser = subparsers.add_parser("dump", help="Write the signature catalog as JSON.")
    dump_parser.add_argument("-o", "--output", dest="output_file", help="The path to the output .json file. Omit to write to stdout.")

    args = parser.parse_args(argv)

    try:
        registry = get_builtin_registry()
        if args.command == "list":
            _print_list(registry)
        elif args.command == "show":
            _print_overloads(registry, args.name)
        else:
            _dump(registry, args.output_file)

    # --- Error Handling ---
    except SignatureError as e:
        print(f"{TerminalColors.RED}--- ERROR ---\n{e}{TerminalColors.RESET}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
