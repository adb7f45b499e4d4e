"""Import and export use cases."""

from .export_bundle_use_case import BUNDLE_VERSION, ExportBundleUseCase, export_filename
from .import_bundle_use_case import ImportBundleUseCase

__all__ = ["BUNDLE_VERSION", "ExportBundleUseCase", "ImportBundleUseCase", "export_filename"]
