import argparse
import logging
from pathlib import Path

from factory.config_builder import ReaderConfigBuilder
from factory.source_model_factory import SourceModelFactory
from models.errors import ClassNotFoundError
from services.factory_method_extractor import FactoryMethodExtractor

logger = logging.getLogger(__name__)

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List the matcher factory methods declared by Java classes."
    )
    parser.add_argument("source_dir", help="Root directory of the Java sources")
    parser.add_argument("class_names", nargs="+", help="Fully qualified names of the classes to read")
    parser.add_argument("--annotation", action="append", dest="annotations",
                        help="Fully qualified factory annotation (repeatable, default org.hamcrest.Factory)")
    parser.add_argument("--language", default="java")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser

def main(argv=None):
    """Read factory methods from a source tree and log their signatures."""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    source_dir = Path(args.source_dir)
    if not source_dir.exists():
        logger.error(f"Source path {source_dir} does not exist")
        return 1

    builder = ReaderConfigBuilder()
    if args.annotations:
        builder.with_factory_annotations(args.annotations)
    config = builder.build()

    source_model = SourceModelFactory.create_source_model(args.language, config)
    source_model.add_source_tree(source_dir)
    extractor = FactoryMethodExtractor(source_model, config=config)

    try:
        for class_name in args.class_names:
            count = 0
            for method in extractor.iter_factory_methods(class_name):
                logger.info(f"{method.matcher_class}: {method.signature()}")
                count += 1
            logger.info(f"Found {count} factory methods in {class_name}")
    except ClassNotFoundError as e:
        logger.error(str(e))
        return 1
    return 0

if __name__ == "__main__":
    exit(main())
