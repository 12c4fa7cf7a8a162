#!/usr/bin/env python3
"""
SteganoTool Command Line Interface

Hide text messages in images and recover them.

Usage:
    steganotool encode [OPTIONS]
    steganotool decode [OPTIONS]
    steganotool capacity [OPTIONS]
    steganotool --version
    steganotool --help
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import Optional

from stegano_core import __version__
from stegano_core.stego import StegoError, SteganographyManager

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2


class SteganoCLI:
    """Main CLI application for SteganoTool."""

    def __init__(self, manager: Optional[SteganographyManager] = None):
        self.manager = manager or SteganographyManager()

    def run(self, args: list) -> int:
        """Run the CLI with given arguments."""
        parser = self.create_parser()
        parsed = parser.parse_args(args)

        logging.basicConfig(
            level=logging.DEBUG if parsed.verbose else logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        if hasattr(parsed, 'func'):
            try:
                return parsed.func(parsed)
            except StegoError as e:
                print(f"Error: {e.message}", file=sys.stderr)
                return EXIT_ERROR
            except (OSError, UnicodeError) as e:
                print(f"Error: {e}", file=sys.stderr)
                return EXIT_ERROR
        else:
            parser.print_help()
            return EXIT_OK

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog="steganotool",
            description="Hide text messages in images using LSB steganography",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
    steganotool encode --input cover.png --message "meet at noon"
    steganotool encode -i cover.jpg -m "meet at noon" -p secret -o out.png
    steganotool decode --input encoded_cover.png --password secret
    steganotool capacity --input cover.png

The password only masks the message; it does not encrypt it.
            """
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'SteganoTool v{__version__}'
        )
        parser.add_argument('--verbose', '-v', action='store_true',
                            help='Verbose logging')

        subparsers = parser.add_subparsers(title='commands', dest='command')

        self.add_encode_command(subparsers)
        self.add_decode_command(subparsers)
        self.add_capacity_command(subparsers)

        return parser

    def add_encode_command(self, subparsers):
        """Add encode command to parser."""
        cmd = subparsers.add_parser('encode', help='Hide a message in an image')
        cmd.add_argument('--input', '-i', required=True, help='Cover image')
        source = cmd.add_mutually_exclusive_group(required=True)
        source.add_argument('--message', '-m', help='Message text')
        source.add_argument('--message-file', help='File containing the message')
        cmd.add_argument('--password', '-p', help='Optional password')
        cmd.add_argument('--output', '-o',
                         help='Output PNG (default: encoded_<name>.png)')
        cmd.add_argument('--progress', action='store_true',
                         help='Show progress on stderr')
        cmd.set_defaults(func=self.handle_encode)

    def add_decode_command(self, subparsers):
        """Add decode command to parser."""
        cmd = subparsers.add_parser('decode', help='Extract a hidden message')
        cmd.add_argument('--input', '-i', required=True, help='Carrier image')
        cmd.add_argument('--password', '-p', help='Password used when encoding')
        cmd.add_argument('--output', '-o', help='Write the message to a file')
        cmd.add_argument('--progress', action='store_true',
                         help='Show progress on stderr')
        cmd.set_defaults(func=self.handle_decode)

    def add_capacity_command(self, subparsers):
        """Add capacity command to parser."""
        cmd = subparsers.add_parser('capacity', help='Show how many characters fit')
        cmd.add_argument('--input', '-i', required=True, help='Cover image')
        cmd.set_defaults(func=self.handle_capacity)

    # Command handlers

    def handle_encode(self, args):
        """Handle encode command."""
        if args.message_file:
            message = Path(args.message_file).read_text(encoding='utf-8')
        else:
            message = args.message

        if not message.strip():
            print("Error: message is empty", file=sys.stderr)
            return EXIT_ERROR

        result = self.manager.embed_file(
            args.input,
            message,
            output_path=args.output,
            password=args.password,
            on_progress=self._progress_printer() if args.progress else None,
        )
        print(f"Encoded {result.message_length}/{result.capacity} characters -> {result.output_path}")
        return EXIT_OK

    def handle_decode(self, args):
        """Handle decode command."""
        result = self.manager.extract_file(
            args.input,
            password=args.password,
            on_progress=self._progress_printer() if args.progress else None,
        )
        if not result.found:
            print("No message found. The image may not contain one, "
                  "or the password is incorrect.", file=sys.stderr)
            return EXIT_NOT_FOUND

        if args.output:
            Path(args.output).write_text(result.message, encoding='utf-8')
            print(f"Message written to {args.output}")
        else:
            print(result.message)
        return EXIT_OK

    def handle_capacity(self, args):
        """Handle capacity command."""
        capacity = self.manager.capacity_of(args.input)
        print(f"{args.input}: {capacity:,} characters")
        return EXIT_OK

    @staticmethod
    def _progress_printer():
        def report(percent: float) -> None:
            end = "\n" if percent >= 100 else ""
            print(f"\rProgress: {percent:5.1f}%", end=end, file=sys.stderr, flush=True)
        return report


def main():
    """Main entry point."""
    cli = SteganoCLI()
    sys.exit(cli.run(sys.argv[1:]))


if __name__ == "__main__":
    main()
