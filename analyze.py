from pathlib import Path

from halo import Halo
from pydub.exceptions import CouldntDecodeError

import constants
from app_state import AppState
from combine import combine_clips_alternately
from errors import InterleaveError
from timestamp_types import Screen
from utils import process_audio_file, split_entries


def handle_analyze(
    state: AppState,
    work_dir: str | Path | None = None,
    separator: str = "lineBreak",
    process=process_audio_file,
    combine=combine_clips_alternately,
) -> bool:
    """
    Split both recordings into clips, label them with the lines of the two
    text areas and combine everything into one interlinear file.

    Failures are reported through `state.analysis.processing_status` so the
    user can fix the input and run again. Returns True on success.
    """
    work_dir = Path(work_dir if work_dir is not None else constants.work_dir)
    analysis = state.analysis
    analysis.is_processing = True
    analysis.processing_status = "Starting audio processing..."

    analysis.text_entries_1 = split_entries(state.text_area_1, separator)
    analysis.text_entries_2 = split_entries(state.text_area_2, separator)

    for slot in (1, 2):
        audio_path = state.audio_file(slot)
        if audio_path is None:
            continue
        try:
            clips = process(audio_path, slot, work_dir)
        except (InterleaveError, CouldntDecodeError, OSError) as e:
            analysis.processing_status = f"Error processing audio file {slot}: {e}"
            analysis.is_processing = False
            return False
        if slot == 1:
            analysis.audio_clips_1 = clips
        else:
            analysis.audio_clips_2 = clips

    spinner = Halo("Combining clips...").start()
    try:
        output_audio, results = combine(
            analysis.audio_clips_1,
            analysis.audio_clips_2,
            analysis.text_entries_1,
            analysis.text_entries_2,
            work_dir / constants.output_audio_name,
            work_dir / constants.output_stops_name,
        )
    except InterleaveError as e:
        spinner.fail("Failed to combine clips.")
        analysis.processing_status = f"Error combining clips: {e}"
        analysis.is_processing = False
        return False
    spinner.succeed(f"Combined audio saved to {output_audio}.")

    analysis.output_audio = output_audio
    analysis.results = results
    analysis.is_processing = False
    analysis.processing_status = "Processing completed!"
    state.navigate(Screen.TEXT_ANALYZER)
    return True
