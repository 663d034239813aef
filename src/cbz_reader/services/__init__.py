"""Services layer - page selection, resource tracking and background extraction."""

from cbz_reader.services.entry_filter import IMAGE_EXTENSIONS, is_image_entry, select_image_entries
from cbz_reader.services.resource_registry import ImageResourceHandle, ResourceRegistry
from cbz_reader.services.proximity_watcher import ProximityWatcher
from cbz_reader.services.chapter_extractor import ChapterContents, PageData, extract_chapter
from cbz_reader.services.settings_manager import ReaderSettings, SettingsManager

# Background workers
from cbz_reader.services.archive_workers import ChapterLoadWorker, WorkerSignals

__all__ = [
	"IMAGE_EXTENSIONS",
	"is_image_entry",
	"select_image_entries",
	"ImageResourceHandle",
	"ResourceRegistry",
	"ProximityWatcher",
	"ChapterContents",
	"PageData",
	"extract_chapter",
	"ReaderSettings",
	"SettingsManager",
	"ChapterLoadWorker",
	"WorkerSignals",
]
