import argparse
import json
import os
import sys
import time

from .analyzer import analyze_document
from .config.config import LANGUAGE_EXTENSIONS, SUPPORTED_LANGUAGES
from .document import TextDocument
from .exceptions import CodesenseError
from .utils import AnalysisArtifactEncoder, TerminalColors

# Single source of truth for stage names and their order.
STAGE_MAP = {
    "1": ("tokens", "Token Stream"),
    "2": ("ast", "Abstract Syntax Tree"),
    "3": ("scopes", "Scope Tree"),
    "4": ("completions", "Completion Items"),
}


def detect_language(path, default="javascript"):
    if not path:
        return default
    return LANGUAGE_EXTENSIONS.get(os.path.splitext(path)[1].lower(), default)


def build_arg_parser() -> argparse.ArgumentParser:
    stage_help_text = "Stop after a specific stage and save its artifact. "
    for key, (name, desc) in STAGE_MAP.items():
        stage_help_text += f"'{key}' for {desc}. "
    stage_help_text += "Omitting this flag prints the completions at the cursor."

    parser = argparse.ArgumentParser(prog="codesense", description="Type-aware code completion for JavaScript, HTML and CSS.")
    parser.add_argument("input_file", nargs="?", default=None, help="The document to analyze. Omit to read from stdin.")
    parser.add_argument("--language", choices=SUPPORTED_LANGUAGES, help="Document language. Defaults to the one implied by the file extension.")
    parser.add_argument("--offset", type=int, help="Cursor offset into the document. Defaults to the end of the document.")
    parser.add_argument("--line", type=int, help="0-based cursor line, used together with --column.")
    parser.add_argument("--column", type=int, help="0-based cursor column, used together with --line.")
    parser.add_argument("-s", "--stage", type=str, choices=STAGE_MAP.keys(), help=stage_help_text)
    parser.add_argument("-o", "--output", dest="output_file", help="Write the completions JSON to this file instead of stdout.")
    parser.add_argument("--lsp", action="store_true", help="Start the language server over stdio.")
    return parser


def main(argv=None):
    start_time = time.perf_counter()
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.lsp:
        from .server import start_server

        start_server()
        return

    # --- Input Validation ---
    if not args.input_file and sys.stdin.isatty():
        parser.error("input_file is required when not reading from a pipe.")
    if (args.line is None) != (args.column is None):
        parser.error("--line and --column must be given together.")
    if args.offset is not None and args.line is not None:
        parser.error("use either --offset or --line/--column, not both.")

    display_path = args.input_file or "stdin"
    print(f"--- Analyzing {display_path} ---", file=sys.stderr)

    try:
        # --- Read Input ---
        if not args.input_file:
            content = sys.stdin.read()
            input_path = None
        else:
            input_path = os.path.abspath(args.input_file)
            with open(input_path, "r", encoding="utf-8") as f:
                content = f.read()

        language = args.language or detect_language(args.input_file)
        offset = args.offset
        if args.line is not None:
            offset = TextDocument(content).position_to_offset(args.line, args.column)

        stop_after_stage = None
        if args.stage:
            stop_after_stage, stage_desc = STAGE_MAP[args.stage]
        dump_stages = [stop_after_stage] if stop_after_stage else []

        # --- Run Analysis ---
        product = analyze_document(
            content,
            file_path=input_path,
            language=language,
            offset=offset,
            dump_stages=dump_stages,
            stop_after_stage=stop_after_stage,
        )

        # --- Handle Output ---
        if stop_after_stage:
            print(f"\n{TerminalColors.GREEN}--- Analysis to stage '{args.stage} ({stage_desc})' successful ---{TerminalColors.RESET}", file=sys.stderr)
        else:
            rendered = json.dumps(product, indent=2, cls=AnalysisArtifactEncoder)
            if args.output_file:
                output_path = os.path.abspath(args.output_file)
                os.makedirs(os.path.dirname(output_path), exist_ok=True)
                with open(output_path, "w", encoding="utf-8") as f:
                    f.write(rendered)
                print(f"\n{TerminalColors.GREEN}--- Analysis Successful ---{TerminalColors.RESET}")
                print(f"{len(product)} completions written to {output_path}")
            else:
                print(rendered)

    # --- Error Handling ---
    except CodesenseError as e:
        print(f"\n{TerminalColors.RED}--- ANALYSIS ERROR ---\n{e}{TerminalColors.RESET}", file=sys.stderr)
        sys.exit(1)
    except FileNotFoundError:
        print(f"{TerminalColors.RED}ERROR: File '{display_path}' not found.{TerminalColors.RESET}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"\n{TerminalColors.RED}--- UNEXPECTED ANALYZER ERROR ---{TerminalColors.RESET}", file=sys.stderr)
        print("This may be a bug in codesense. Please report it.", file=sys.stderr)
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)

    finally:
        # --- Execution Time ---
        # Status lines go to stderr so stdout carries only the JSON.
        end_time = time.perf_counter()
        print(f"\n{TerminalColors.CYAN}--- Total Execution Time: {end_time - start_time:.4f} seconds ---{TerminalColors.RESET}", file=sys.stderr)


if __name__ == "__main__":
    main()
