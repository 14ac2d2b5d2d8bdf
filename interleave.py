import argparse
import sys
from pathlib import Path

import constants
from analyze import handle_analyze
from app_state import AppState, render
from combine import combine_clips_alternately
from errors import InterleaveError
from playback import play_clip
from utils import process_audio_file, split_entries


def read_labels(text_path, separator):
    """Read a text file and split it into labels."""
    return split_entries(Path(text_path).read_text(encoding="utf-8"), separator)


def run_combine(args):
    labels1 = read_labels(args.labels1, args.separator)
    labels2 = read_labels(args.labels2, args.separator)
    output_path, results = combine_clips_alternately(
        args.clips1, args.clips2, labels1, labels2, args.output, args.stops
    )
    for entry in results:
        print(f"{entry['audio_stop']:10.3f}  {entry['label']}")
    print(f"✅ Interlinear audio saved to {output_path}")


def run_split(args):
    clips = process_audio_file(args.audio, args.file_id, args.work_dir)
    for clip in clips:
        print(clip)


def run_analyze(args):
    state = AppState()
    state.text_area_1 = Path(args.txt1).read_text(encoding="utf-8")
    state.text_area_2 = Path(args.txt2).read_text(encoding="utf-8")
    state.select_audio_file(1, args.audio1)
    state.select_audio_file(2, args.audio2)

    ok = handle_analyze(state, work_dir=args.work_dir, separator=args.separator)
    print("\n".join(render(state)))
    if not ok:
        raise InterleaveError(state.analysis.processing_status)


def run_play(args):
    play_clip(args.clip).wait()


def build_parser():
    parser = argparse.ArgumentParser(
        description="Interleave the clips of two recordings into one audio file."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    separators = sorted(constants.text_separators)

    combine = subparsers.add_parser("combine", help="Combine two lists of WAV clips")
    combine.add_argument('--clips1', nargs="+", required=True, help="Clips of the first recording, in order")
    combine.add_argument('--clips2', nargs="+", required=True, help="Clips of the second recording, in order")
    combine.add_argument('--labels1', required=True, help="Text file with one label per clip of --clips1")
    combine.add_argument('--labels2', required=True, help="Text file with one label per clip of --clips2")
    combine.add_argument('--output', default=constants.output_audio_name, help="Output WAV file (default: audio.wav)")
    combine.add_argument('--stops', default=constants.output_stops_name, help="Output JSON file (default: stops.json)")
    combine.add_argument('--separator', default="lineBreak", choices=separators, help="Label separator")
    combine.set_defaults(func=run_combine)

    split = subparsers.add_parser("split", help="Convert a recording and split it on silence")
    split.add_argument('audio', help="Path to the recording")
    split.add_argument('--file-id', type=int, default=1, help="Number of the working folder")
    split.add_argument('--work-dir', default=constants.work_dir, help="Folder for converted audio and clips")
    split.set_defaults(func=run_split)

    analyze = subparsers.add_parser("analyze", help="Split two recordings and combine them with their texts")
    analyze.add_argument('--audio1', required=True, help="Path to the first audio file")
    analyze.add_argument('--txt1', required=True, help="Path to the first text file")
    analyze.add_argument('--audio2', required=True, help="Path to the second audio file")
    analyze.add_argument('--txt2', required=True, help="Path to the second text file")
    analyze.add_argument('--separator', default="lineBreak", choices=separators, help="Label separator")
    analyze.add_argument('--work-dir', default=constants.work_dir, help="Folder for intermediate and output files")
    analyze.set_defaults(func=run_analyze)

    play = subparsers.add_parser("play", help="Play a clip with the system player")
    play.add_argument('clip', help="Path to a WAV clip")
    play.set_defaults(func=run_play)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        args.func(args)
    except (InterleaveError, OSError) as e:
        print(f"❌ Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
