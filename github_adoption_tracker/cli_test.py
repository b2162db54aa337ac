"""Unit tests for CLI argument parsing."""

from pathlib import Path

from .cli import build_parser


def describe_build_parser():
    def it_uses_defaults():
        args = build_parser().parse_args([])

        assert args.filenames is None
        assert args.language == "yaml"
        assert args.qualifiers == []
        assert args.label == "GORELEASER"
        assert args.output_dir == Path(".")
        assert args.workers == 1
        assert args.verbose is False

    def it_collects_repeated_filenames_and_qualifiers():
        args = build_parser().parse_args([
            "--filename", "Taskfile.yml",
            "--filename", "Taskfile.yaml",
            "--qualifier", "fork:false",
            "--qualifier", "org:go-task",
            "--workers", "4",
        ])

        assert args.filenames == ["Taskfile.yml", "Taskfile.yaml"]
        assert args.qualifiers == ["fork:false", "org:go-task"]
        assert args.workers == 4
