"""Exporters for handing extracted articles to storage systems."""

from .exporter import Exporter
from .json_exporter import JSONExporter
from .mods_exporter import MODSExporter

EXPORTERS: dict[str, type[Exporter]] = {
    "json": JSONExporter,
    "mods": MODSExporter,
}

__all__ = ["EXPORTERS", "Exporter", "JSONExporter", "MODSExporter"]
