#!/usr/bin/env python3

import argparse
import logging
import yaml
from typing import Dict, Any, List, Optional

from latlong_codec import (
    latitude_to_str,
    longitude_to_str,
    latitude_to_comp_str,
    longitude_to_comp_str,
    latitude_to_nmea,
    longitude_to_nmea,
    latitude_from_nmea,
    longitude_from_nmea,
)

OUTPUT_FORMATS = ["aprs", "compressed", "nmea"]

DEFAULT_CONFIG = {
    "loglevel": "INFO",
    "ambiguity": 0,
    "format": "aprs",
}


def parse_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    level_str = level_str.upper()
    levels = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    if level_str not in levels:
        raise ValueError(
            f"Invalid log level: {level_str}. Must be one of {', '.join(levels.keys())}"
        )
    return levels[level_str]


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load configuration from YAML file, filling in defaults."""
    config = dict(DEFAULT_CONFIG)
    if config_path:
        with open(config_path, "r") as f:
            config.update(yaml.safe_load(f) or {})

    if config["format"] not in OUTPUT_FORMATS:
        raise ValueError(
            f"Invalid format: {config['format']}. Must be one of {', '.join(OUTPUT_FORMATS)}"
        )
    ambiguity = config["ambiguity"]
    if isinstance(ambiguity, bool) or not isinstance(ambiguity, int) or not 0 <= ambiguity <= 4:
        raise ValueError(f"Ambiguity must be an integer 0 to 4, got: {config['ambiguity']}")
    return config


def encode_position(lat: float, lon: float, output_format: str, ambiguity: int = 0) -> str:
    """Encode a position into the latitude and longitude fields of the chosen format."""
    if output_format == "aprs":
        return f"{latitude_to_str(lat, ambiguity)}/{longitude_to_str(lon, ambiguity)}"
    elif output_format == "compressed":
        return latitude_to_comp_str(lat) + longitude_to_comp_str(lon)
    elif output_format == "nmea":
        return ",".join(latitude_to_nmea(lat) + longitude_to_nmea(lon))
    raise ValueError(f"Invalid format: {output_format}")


def decode_position(lat_token: str, lat_hemi: str, lon_token: str, lon_hemi: str) -> str:
    """Decode NMEA latitude/longitude fields to 'lat,lon' in decimal degrees."""
    lat = latitude_from_nmea(lat_token, lat_hemi)
    lon = longitude_from_nmea(lon_token, lon_hemi)
    fields = ["unknown" if v is None else f"{v:.6f}" for v in (lat, lon)]
    return ",".join(fields)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert coordinates to and from APRS and NMEA 0183 position fields"
    )
    parser.add_argument("--config", help="Path to YAML configuration file")
    parser.add_argument(
        "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override logging level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Encode decimal degrees")
    encode.add_argument("lat", type=float, help="Latitude in decimal degrees")
    encode.add_argument("lon", type=float, help="Longitude in decimal degrees")
    encode.add_argument(
        "--format", choices=OUTPUT_FORMATS, help="Override output format"
    )
    encode.add_argument(
        "--ambiguity",
        type=int,
        choices=range(0, 5),
        help="Override position ambiguity (aprs format only)",
    )

    decode = subparsers.add_parser("decode", help="Decode NMEA 0183 fields")
    decode.add_argument("lat_token", help="Latitude field, e.g. 4807.038")
    decode.add_argument("lat_hemi", help="N or S (use '' when empty)")
    decode.add_argument("lon_token", help="Longitude field, e.g. 01131.000")
    decode.add_argument("lon_hemi", help="E or W (use '' when empty)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the coordinate converter"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config)

    # Command-line arguments override config file
    if args.loglevel:
        config["loglevel"] = args.loglevel
    if getattr(args, "format", None):
        config["format"] = args.format
    if getattr(args, "ambiguity", None) is not None:
        config["ambiguity"] = args.ambiguity

    # Set up logging
    logging.basicConfig(
        level=parse_log_level(config["loglevel"]),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.command == "encode":
        logging.debug(f"Encoding {args.lat}, {args.lon} as {config['format']}")
        print(encode_position(args.lat, args.lon, config["format"], config["ambiguity"]))
    else:
        print(decode_position(args.lat_token, args.lat_hemi, args.lon_token, args.lon_hemi))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
