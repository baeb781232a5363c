# src/mdconcat/cli.py
import sys
import argparse
import stat
from pathlib import Path

from mdconcat.core.pipeline import (
    OutputWriteError,
    ScanError,
    SourceReadError,
    concat_markdown,
)

class UsageExitParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")

def create_arg_parser():
    parser = UsageExitParser(
        prog="mdconcat",
        description="Concatenate every Markdown file under a directory into a single file.",
    )
    parser.add_argument("input_dir", type=str, help="Directory to scan recursively")
    parser.add_argument("output_file", type=str, help="Destination Markdown file")
    return parser

def check_input_dir(raw_path: str) -> Path:
    """Resolves the input directory, exiting with status 1 if it is unusable."""
    input_dir = Path(raw_path).resolve()
    try:
        st = input_dir.stat()
    except OSError as e:
        print(f'Error: cannot access input directory "{raw_path}"', file=sys.stderr)
        print(e, file=sys.stderr)
        sys.exit(1)

    if not stat.S_ISDIR(st.st_mode):
        print(f"Error: {raw_path} is not a directory", file=sys.stderr)
        sys.exit(1)
    return input_dir

def main(argv=None):
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)
        if not args.input_dir or not args.output_file:
            parser.error("input_dir and output_file must not be empty")

        input_dir = check_input_dir(args.input_dir)
        output_file = Path(args.output_file).resolve()

        print("--- mdconcat ---")
        print(f"Scanning: {input_dir}")
        print(f"Output:   {output_file}")

        # 2. Merge
        result = concat_markdown(input_dir, output_file)

        # 3. Report
        if result.file_count == 0:
            print("Warning: No Markdown files found. Creating an empty output file.", file=sys.stderr)
            return

        print(f"Done. Wrote {result.file_count} files into:\n{result.output_file}")
        print(f"Estimated tokens: {result.token_count}")

    except ScanError as e:
        print(f"Error scanning {e.target}: {e.cause}", file=sys.stderr)
        sys.exit(1)

    except SourceReadError as e:
        print(f"Error reading {e.rel_path}: {e.cause}", file=sys.stderr)
        sys.exit(1)

    except OutputWriteError as e:
        print(f"Error writing file: {e.cause}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
