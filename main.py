#!/usr/bin/env python3
"""
Theory Synthesizer — Main Entry Point

Content in. Thesis, formulas, models and experiments out.

Usage:
    python main.py notes.txt                         # Plain text file
    python main.py --text "Energia cinética e calor"  # Inline text
    python main.py --medium pdf --text "..."          # Inline text copied from a PDF
    python main.py --medium pdf extracted.txt         # Text extracted from a PDF
    python main.py --medium audio take01.yaml         # Audio metadata file
    python main.py notes.txt --save                   # Write .md/.json to runs/
    python main.py notes.txt --json                   # Print the full record
    python main.py notes.txt --config settings.yaml   # CLI settings from YAML
"""

import argparse
import json
import sys

from dotenv import load_dotenv

# Load environment before settings are resolved
load_dotenv()

from theory_synth import InvalidInputError, synthesize
from theory_synth.config import load_cli_settings, MEDIUM_LABELS
from theory_synth.export import format_human_summary, save_synthesis, theory_to_dict
from theory_synth.ingestion import IngestionError, from_pdf_text, from_text, load_source


def display_source(content: str, descriptor) -> None:
    """Display what was ingested."""
    medium = descriptor.medium.value
    print("\n" + "=" * 60)
    print("ENTRADA")
    print("=" * 60)
    print(f"Mídia:      {MEDIUM_LABELS.get(medium, medium)}")
    print(f"Caracteres: {descriptor.length}")
    if descriptor.context_tag:
        print(f"Origem:     {descriptor.context_tag}")
    for note in descriptor.additional_notes:
        print(f"Nota:       {note}")
    print(f"Conteúdo:   {content[:80]}{'...' if len(content) > 80 else ''}")
    print("=" * 60)


def display_concepts(theory) -> None:
    print("\n  Conceitos:")
    for c in theory.concepts:
        print(f"    {c.term:<20} peso={c.weight:.3f} ocorrências={c.occurrences}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Theory Synthesizer — unstructured content to structured theory"
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="File to analyze (text, extracted PDF text, or audio metadata YAML/JSON)",
    )
    parser.add_argument(
        "--text",
        default=None,
        help="Analyze this text directly instead of a file",
    )
    parser.add_argument(
        "--medium",
        default=None,
        choices=sorted(MEDIUM_LABELS),
        help="Source medium (default: text, or THEORY_SYNTH_MEDIUM)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with CLI settings (runs_dir, default_medium, save_json)",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Write markdown (and JSON) export to the runs directory",
    )
    parser.add_argument(
        "--runs-dir",
        default=None,
        help="Output directory for --save (default: runs/)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full synthesis as JSON instead of the summary",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_cli_settings(args.config)
    except (OSError, ValueError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    medium = args.medium or settings["default_medium"]
    runs_dir = args.runs_dir or settings["runs_dir"]

    # Audio always comes from a metadata file
    if args.text is not None and args.medium == "audio":
        parser.error("--text cannot be combined with --medium audio")

    try:
        if args.text is not None and args.medium == "pdf":
            content, descriptor = from_pdf_text(args.text)
        elif args.text is not None:
            content, descriptor = from_text(args.text)
        elif args.source:
            content, descriptor = load_source(args.source, medium)
        else:
            parser.error("provide a SOURCE file or --text")
        theory = synthesize(content, descriptor)
    except IngestionError as e:
        print(f"\n{e}", file=sys.stderr)
        return 1
    except InvalidInputError:
        print("\nNenhum conteúdo pôde ser extraído.", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(theory_to_dict(theory), indent=2, ensure_ascii=False))
    else:
        print("\nTheory Synthesizer")
        display_source(content, descriptor)
        display_concepts(theory)
        print(f"\n{format_human_summary(theory)}")

    if args.save:
        paths = save_synthesis(
            theory,
            output_dir=runs_dir,
            include_json=settings["save_json"],
        )
        if not args.json:
            print(f"\nSaved to: {runs_dir}/")
            print(f"  {len(paths)} files ({', '.join(sorted(paths))})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
