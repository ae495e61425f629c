from .export_service import export_notes, format_export, format_note_record

__all__ = ["export_notes", "format_export", "format_note_record"]
