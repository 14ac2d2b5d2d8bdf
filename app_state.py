"""
State of the editor and the functions that render each screen as text.

Everything the editor window shows lives in an explicit `AppState`.
Transitions are methods on it and every renderer is a pure function of the
state.
"""

from dataclasses import dataclass, field
from pathlib import Path

from timestamp_types import CombinedStats, ResultEntry, Screen, TextStats

SCREEN_TITLES = {
    Screen.MAIN: "Main",
    Screen.SETTINGS: "Settings",
    Screen.FILE_MANAGER: "File Manager",
    Screen.TEXT_ANALYZER: "Text Analyzer",
}


@dataclass
class Settings:
    window_title: str = ""
    auto_save: bool = False
    theme_dark: bool = False

    def reset(self) -> None:
        self.window_title = ""
        self.auto_save = False
        self.theme_dark = False


@dataclass
class AnalysisData:
    text_entries_1: list[str] = field(default_factory=list)
    text_entries_2: list[str] = field(default_factory=list)
    audio_clips_1: list[Path] = field(default_factory=list)
    audio_clips_2: list[Path] = field(default_factory=list)
    is_processing: bool = False
    processing_status: str = ""
    output_audio: Path | None = None
    results: list[ResultEntry] = field(default_factory=list)

    def entries(self, side: int) -> list[str]:
        _check_side(side)
        return self.text_entries_1 if side == 1 else self.text_entries_2

    def clips(self, side: int) -> list[Path]:
        _check_side(side)
        return self.audio_clips_1 if side == 1 else self.audio_clips_2

    def stop_for(self, side: int, index: int) -> float | None:
        """End offset of an entry in the combined file, if it was combined."""
        position = 2 * index + (side - 1)
        if position < len(self.results):
            return self.results[position]["audio_stop"]
        return None


@dataclass
class AppState:
    current_screen: Screen = Screen.MAIN
    text_area_1: str = ""
    text_area_2: str = ""
    audio_file_1: Path | None = None
    audio_file_2: Path | None = None
    settings: Settings = field(default_factory=Settings)
    file_history: list[Path] = field(default_factory=list)
    analysis: AnalysisData = field(default_factory=AnalysisData)

    def navigate(self, screen: Screen) -> None:
        self.current_screen = screen

    def audio_file(self, slot: int) -> Path | None:
        _check_side(slot)
        return self.audio_file_1 if slot == 1 else self.audio_file_2

    def text_area(self, slot: int) -> str:
        _check_side(slot)
        return self.text_area_1 if slot == 1 else self.text_area_2

    def _set_audio_file(self, slot: int, path: Path | None) -> None:
        _check_side(slot)
        if slot == 1:
            self.audio_file_1 = path
        else:
            self.audio_file_2 = path

    def select_audio_file(self, slot: int, path: str | Path) -> None:
        path = Path(path)
        self._set_audio_file(slot, path)
        if path not in self.file_history:
            self.file_history.append(path)

    def clear_audio_file(self, slot: int) -> None:
        self._set_audio_file(slot, None)

    def select_from_history(self, index: int, slot: int) -> None:
        self._set_audio_file(slot, self.file_history[index])

    def remove_from_history(self, index: int) -> None:
        del self.file_history[index]

    def clear_history(self) -> None:
        self.file_history.clear()

    def clear_all_data(self) -> None:
        # History and settings survive, as in the settings screen.
        self.text_area_1 = ""
        self.text_area_2 = ""
        self.audio_file_1 = None
        self.audio_file_2 = None

    def add_entry(self, side: int) -> None:
        self.analysis.entries(side).append("")

    def remove_entry(self, side: int, index: int) -> None:
        del self.analysis.entries(side)[index]

    def move_entry_up(self, side: int, index: int) -> None:
        entries = self.analysis.entries(side)
        if not 0 < index < len(entries):
            raise IndexError(f"Cannot move entry {index} up")
        entries[index - 1], entries[index] = entries[index], entries[index - 1]

    def move_entry_down(self, side: int, index: int) -> None:
        entries = self.analysis.entries(side)
        if not 0 <= index < len(entries) - 1:
            raise IndexError(f"Cannot move entry {index} down")
        entries[index + 1], entries[index] = entries[index], entries[index + 1]


def _check_side(side: int) -> None:
    if side not in (1, 2):
        raise ValueError(f"Side must be 1 or 2, got {side}")


def text_stats(text: str) -> TextStats:
    lines = text.split("\n")
    non_empty = sum(1 for line in lines if line)
    return {
        "total_lines": len(lines),
        "non_empty_lines": non_empty,
        "empty_lines": len(lines) - non_empty,
        "characters": len(text),
    }


def combined_stats(text1: str, text2: str) -> CombinedStats:
    stats1 = text_stats(text1)
    stats2 = text_stats(text2)
    total_lines = stats1["total_lines"] + stats2["total_lines"]
    characters = stats1["characters"] + stats2["characters"]
    return {
        "total_lines": total_lines,
        "characters": characters,
        "average_line_length": characters / total_lines if total_lines else 0.0,
    }


def render_navigation(state: AppState) -> list[str]:
    tabs = [
        f"[{title}]" if screen == state.current_screen else f" {title} "
        for screen, title in SCREEN_TITLES.items()
    ]
    return [" ".join(tabs), "-" * 40]


def render_main(state: AppState) -> list[str]:
    lines = ["Text Editor with Audio File Selector", ""]

    for slot in (1, 2):
        text = state.text_area(slot)
        lines.append(f"Text Area {slot}:")
        if text:
            lines.extend(f"  {line}" for line in text.split("\n"))
        else:
            lines.append("  Enter your text here...")
        path = state.audio_file(slot)
        selected = f"Selected: {path}" if path else "No file selected"
        lines.append(f"Audio File {slot}: {selected}")
        lines.append("")

    lines.append("Status:")
    lines.append(f"Text Area 1: {len(state.text_area_1)} characters")
    lines.append(f"Text Area 2: {len(state.text_area_2)} characters")
    for slot in (1, 2):
        path = state.audio_file(slot)
        if path:
            lines.append(f"Audio File {slot}: {path.name}")

    return lines


def render_settings(state: AppState) -> list[str]:
    settings = state.settings
    length_1 = len(state.text_area_1)
    length_2 = len(state.text_area_2)
    return [
        "Settings",
        "",
        "Application Settings",
        f"Window Title: {settings.window_title}",
        f"[{'x' if settings.auto_save else ' '}] Auto-save text content",
        f"[{'x' if settings.theme_dark else ' '}] Dark theme",
        "",
        "Statistics",
        f"Total files in history: {len(state.file_history)}",
        f"Current text length: {length_1} + {length_2} = {length_1 + length_2} characters",
    ]


def render_file_manager(state: AppState) -> list[str]:
    lines = ["File Manager", "", "Currently Selected Files"]
    for slot in (1, 2):
        path = state.audio_file(slot)
        lines.append(f"Audio File {slot}: {path if path else 'Not selected'}")

    lines.extend(["", "File History"])
    if not state.file_history:
        lines.append("No files in history")
    else:
        lines.extend(f"{i + 1}. {path}" for i, path in enumerate(state.file_history))

    return lines


def render_text_analyzer(state: AppState) -> list[str]:
    analysis = state.analysis
    lines = ["Interactive Text & Audio Analyzer", ""]

    if analysis.is_processing:
        lines.append(analysis.processing_status)
        lines.append("Processing...")
        return lines

    if analysis.processing_status:
        lines.extend([analysis.processing_status, ""])

    for side in (1, 2):
        entries = analysis.entries(side)
        clips = analysis.clips(side)
        lines.append(f"Text Area {side} - Interactive Entries:")
        for i, entry in enumerate(entries):
            lines.append(f"{i + 1}: {entry}")
            if i < len(clips):
                clip_line = f"   Clip: {clips[i].name}"
                stop = analysis.stop_for(side, i)
                if stop is not None:
                    clip_line += f" (ends at {stop:.2f}s)"
                lines.append(clip_line)
            else:
                lines.append("   No audio clip")
        lines.append(f"Total entries: {len(entries)}")
        lines.append(f"Audio clips: {len(clips)}")
        lines.append("")

    stats = combined_stats(state.text_area_1, state.text_area_2)
    lines.append("Combined Statistics:")
    lines.append(f"Total lines across both areas: {stats['total_lines']}")
    lines.append(f"Total characters across both areas: {stats['characters']}")
    lines.append(f"Average line length: {stats['average_line_length']:.1f} characters")

    return lines


RENDERERS = {
    Screen.MAIN: render_main,
    Screen.SETTINGS: render_settings,
    Screen.FILE_MANAGER: render_file_manager,
    Screen.TEXT_ANALYZER: render_text_analyzer,
}


def render(state: AppState) -> list[str]:
    return render_navigation(state) + RENDERERS[state.current_screen](state)
