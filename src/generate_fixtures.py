import argparse
import json
import logging
import sys

from core import config
from utils.json_generator import JsonGenerator

logger = logging.getLogger(config.LOGGER_NAME)


def generate_fixtures(schema_path, count=1, output_path=None):
    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    generator = JsonGenerator()
    fixtures = [generator.generate_json_from_schema(schema) for _ in range(count)]
    payload = fixtures[0] if count == 1 else fixtures

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        logger.info(f"Generated {count} fixture(s) in {output_path}")
    else:
        json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")

    return payload


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate JSON fixtures from a schema file.")
    parser.add_argument("schema", help="Path to a JSON schema node")
    parser.add_argument("-n", "--count", type=int, default=1, help="Number of fixtures to generate")
    parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error("--count must be at least 1")

    logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s [%(levelname)s] %(message)s')
    generate_fixtures(args.schema, count=args.count, output_path=args.output)


if __name__ == "__main__":
    main()
