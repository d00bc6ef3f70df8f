"""
Command-line interface for KML to GeoJSON conversion.
"""

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from kml_geojson import __version__
from kml_geojson.convert import convert_kml_file
from kml_geojson.core.config import ConverterConfig
from kml_geojson.core.exceptions import ConversionError


@click.command()
@click.version_option(version=__version__, prog_name="kml2geojson")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write GeoJSON to this file instead of stdout.",
)
@click.option("--indent", type=int, default=None, help="JSON indentation width.")
@click.option("--compact", is_flag=True, help="Emit compact single-line JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Log conversion progress.")
def main(
    source: Path,
    output: Optional[Path],
    indent: Optional[int],
    compact: bool,
    verbose: bool,
) -> None:
    """
    Convert a KML or KMZ file to a GeoJSON FeatureCollection.

    \b
    Environment variables:
      KML_GEOJSON_INDENT     Default JSON indentation (-1 for compact)
      KML_GEOJSON_HUGE_TREE  Lift XML parser size limits (1/true/yes/on)
      KML_GEOJSON_LOG_LEVEL  Logging level (default WARNING)

    \b
    Examples:
      kml2geojson tracks.kml
      kml2geojson doc.kmz -o doc.geojson --compact
    """
    try:
        config = ConverterConfig.from_env()
    except ConversionError as e:
        click.echo(f"Error [{e.code}]: {e.message}", err=True)
        sys.exit(1)

    logging.basicConfig(
        level=logging.INFO if verbose else config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if compact:
        config = replace(config, indent=None)
    elif indent is not None:
        config = replace(config, indent=indent)

    try:
        geojson = convert_kml_file(source, config)
    except ConversionError as e:
        click.echo(f"Error [{e.code}]: {e.message}", err=True)
        sys.exit(1)

    if output:
        output.write_text(geojson + "\n", encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(geojson)


if __name__ == "__main__":
    main()
