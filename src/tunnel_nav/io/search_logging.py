# io/search_logging.py
import json
import logging
import sys

from tunnel_nav.engine.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    """One JSON object per line; a record's `extra` dict is flattened into it."""

    def format(self, record: logging.LogRecord) -> str:
        out = {
            "ts": round(record.created, 3),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = getattr(record, "extra", None)
        if isinstance(fields, dict):
            out.update(fields)
        if record.exc_info:
            out["exc"] = self.formatException(record.exc_info)
        return json.dumps(out, default=str)


def default_json_logger(name="tunnel_nav", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not any(isinstance(h.formatter, _JsonFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for route searches. Expansions are only logged in debug mode,
    one line every `sample_every` nodes.
    """

    def __init__(
        self,
        run_id: str = "local",
        *,
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id = run_id
        self.debug = debug
        self.sample_every = max(1, sample_every)
        self.log = logger or default_json_logger(level=level)
        self._searches = 0

    def _emit(self, levelno: int, msg: str, **fields):
        if self.log.isEnabledFor(levelno):
            fields = {"run_id": self.run_id, "search": self._searches, **fields}
            self.log.log(levelno, msg, extra={"extra": fields})

    def search_start(self, *, start, end, comparator: str):
        self._searches += 1
        self._emit(
            logging.INFO, "search_start", start=str(start), end=str(end), comparator=comparator
        )

    def expand(self, record, *, expanded: int, qsize: int):
        if not self.debug or expanded % self.sample_every:
            return
        self._emit(
            logging.DEBUG,
            "expand",
            at=str(record.location),
            time=record.time,
            expanded=expanded,
            qsize=qsize,
        )

    def search_end(self, *, found: bool, expanded: int, pushed: int, ms: float):
        if found:
            level, msg = logging.INFO, "search_end"
        else:
            level, msg = logging.WARNING, "no_route"
        self._emit(level, msg, found=found, expanded=expanded, pushed=pushed, ms=round(ms, 3))

    def error(self, *, reason: str, **extra):
        self._emit(logging.ERROR, "search_error", reason=reason, **extra)
