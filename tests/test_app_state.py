from pathlib import Path

import pytest

from app_state import (
    AppState,
    combined_stats,
    render,
    render_file_manager,
    render_main,
    render_settings,
    render_text_analyzer,
    text_stats,
)
from timestamp_types import Screen


def test_initial_state_is_main_screen():
    state = AppState()

    assert state.current_screen == Screen.MAIN
    assert state.audio_file_1 is None
    assert state.file_history == []


def test_select_audio_file_records_history_once():
    state = AppState()

    state.select_audio_file(1, "one.mp3")
    state.select_audio_file(2, "two.mp3")
    state.select_audio_file(2, "one.mp3")

    assert state.audio_file_1 == Path("one.mp3")
    assert state.audio_file_2 == Path("one.mp3")
    assert state.file_history == [Path("one.mp3"), Path("two.mp3")]


def test_history_operations():
    state = AppState()
    state.select_audio_file(1, "one.mp3")
    state.select_audio_file(1, "two.mp3")
    state.select_audio_file(1, "three.mp3")

    state.select_from_history(0, 2)
    state.remove_from_history(1)

    assert state.audio_file_2 == Path("one.mp3")
    assert state.file_history == [Path("one.mp3"), Path("three.mp3")]

    state.clear_history()
    assert state.file_history == []
    with pytest.raises(IndexError):
        state.select_from_history(0, 1)


def test_clear_all_data_keeps_history_and_settings():
    state = AppState(text_area_1="hello", text_area_2="hola")
    state.select_audio_file(1, "one.mp3")
    state.settings.auto_save = True

    state.clear_all_data()

    assert state.text_area_1 == state.text_area_2 == ""
    assert state.audio_file_1 is None
    assert state.file_history == [Path("one.mp3")]
    assert state.settings.auto_save is True


def test_settings_reset():
    state = AppState()
    state.settings.window_title = "Mine"
    state.settings.theme_dark = True

    state.settings.reset()

    assert state.settings.window_title == ""
    assert state.settings.theme_dark is False


def test_invalid_slot():
    state = AppState()

    with pytest.raises(ValueError):
        state.select_audio_file(3, "x.mp3")
    with pytest.raises(ValueError):
        state.add_entry(0)


def test_entry_editing():
    state = AppState()
    state.analysis.text_entries_1 = ["a", "b", "c"]

    state.move_entry_up(1, 2)
    assert state.analysis.text_entries_1 == ["a", "c", "b"]

    state.move_entry_down(1, 0)
    assert state.analysis.text_entries_1 == ["c", "a", "b"]

    state.remove_entry(1, 1)
    state.add_entry(1)
    assert state.analysis.text_entries_1 == ["c", "b", ""]


def test_entries_cannot_move_past_the_ends():
    state = AppState()
    state.analysis.text_entries_2 = ["a", "b"]

    with pytest.raises(IndexError):
        state.move_entry_up(2, 0)
    with pytest.raises(IndexError):
        state.move_entry_down(2, 1)


def test_text_stats():
    assert text_stats("one\n\nthree") == {
        "total_lines": 3,
        "non_empty_lines": 2,
        "empty_lines": 1,
        "characters": 10,
    }


def test_combined_stats():
    stats = combined_stats("ab\ncd", "efgh")

    assert stats["total_lines"] == 3
    assert stats["characters"] == 9
    assert stats["average_line_length"] == 3.0


def test_navigation_marks_the_current_screen():
    state = AppState()
    state.navigate(Screen.FILE_MANAGER)

    lines = render(state)

    assert "[File Manager]" in lines[0]
    assert "[Main]" not in lines[0]
    assert "File Manager" in lines[2]


def test_render_main():
    state = AppState(text_area_1="hello")
    state.select_audio_file(2, "/tmp/two.mp3")

    lines = render_main(state)

    assert "  hello" in lines
    assert "  Enter your text here..." in lines
    assert "Audio File 1: No file selected" in lines
    assert "Audio File 2: two.mp3" in lines
    assert "Text Area 1: 5 characters" in lines


def test_render_settings():
    state = AppState(text_area_1="abc", text_area_2="de")
    state.settings.auto_save = True

    lines = render_settings(state)

    assert "[x] Auto-save text content" in lines
    assert "[ ] Dark theme" in lines
    assert "Current text length: 3 + 2 = 5 characters" in lines


def test_render_file_manager_without_history():
    lines = render_file_manager(AppState())

    assert "Audio File 1: Not selected" in lines
    assert "No files in history" in lines


def test_render_text_analyzer_with_results():
    state = AppState()
    analysis = state.analysis
    analysis.text_entries_1 = ["Hello", "Bye"]
    analysis.text_entries_2 = ["Hola"]
    analysis.audio_clips_1 = [Path("clips/0.wav"), Path("clips/1.wav")]
    analysis.audio_clips_2 = [Path("clips/0.wav")]
    analysis.results = [
        {"label": "Hello", "audio_stop": 1.5},
        {"label": "Hola", "audio_stop": 3.25},
    ]
    analysis.processing_status = "Processing completed!"

    lines = render_text_analyzer(state)

    assert "Processing completed!" in lines
    assert "1: Hello" in lines
    assert "   Clip: 0.wav (ends at 1.50s)" in lines
    assert "   Clip: 1.wav" in lines
    assert "   Clip: 0.wav (ends at 3.25s)" in lines
    assert "Audio clips: 1" in lines


def test_render_text_analyzer_missing_clip_and_processing():
    state = AppState()
    state.analysis.text_entries_2 = ["Hola"]

    assert "   No audio clip" in render_text_analyzer(state)

    state.analysis.is_processing = True
    state.analysis.processing_status = "Starting audio processing..."
    lines = render_text_analyzer(state)
    assert lines[-2:] == ["Starting audio processing...", "Processing..."]
