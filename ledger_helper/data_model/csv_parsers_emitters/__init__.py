from .split_csv_parser_emitter import SplitCsvParserEmitter

__all__ = ["SplitCsvParserEmitter"]
