"""asdf-style `.tool-versions` document model.

Example file:

    # intro comment
    python 3.11.0 3.10.0 # some comment
    shellcheck 0.9.0
    shfmt 3.6.0

Each data line is a plugin name followed by the versions a resolver should
try, in order. Comments are kept verbatim so that editing the versions of
one plugin never disturbs the rest of the file.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from versions_kit.observability import names
from versions_kit.observability.base import MetricsHook, NoOpMetricsHook, timed

from .base import ConfigFileType, PluginSource
from .errors import ConfigFileIOError
from .settings import ConfigFileSettings

logger = logging.getLogger(__name__)

_LABELS = {"type": ConfigFileType.TOOL_VERSIONS.value}

# Unicode whitespace minus the \x1c-\x1f separators, which str.isspace()
# counts but a tool-versions file treats as ordinary characters
_WS = r"[^\S\x1c-\x1f]"
_SPLIT_RE = re.compile(_WS + "+")
_LEADING_RE = re.compile(_WS + "*")
_TRAILING_RE = re.compile(_WS + r"+\Z")


@dataclass
class ToolVersionPlugin:
    """One plugin line: its versions and the comment text emitted after them."""

    versions: list[str] = field(default_factory=list)
    post: str = "\n"


def _lines(text: str) -> list[str]:
    # "\n" and "\r\n" only; form feeds and other separators stay in the line
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _is_comment(line: str) -> bool:
    return line.startswith("#", _LEADING_RE.match(line).end())


class ToolVersions:
    """Parsed `.tool-versions` file.

    Parsing is total: any text produces a document. Only reading and
    writing the backing file can fail, with `ConfigFileIOError`.
    """

    def __init__(
        self,
        path: Path | None = None,
        pre: str = "",
        plugins: dict[str, ToolVersionPlugin] | None = None,
        *,
        encoding: str = "utf-8",
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.path = path
        self.pre = pre
        self._plugins: dict[str, ToolVersionPlugin] = (
            dict(plugins) if plugins else {}
        )
        self._encoding = encoding
        self.metrics_hook = metrics_hook

    @classmethod
    def init(
        cls,
        path: Path,
        settings: ConfigFileSettings | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> "ToolVersions":
        """Create an empty document bound to `path`. Nothing is written."""
        settings = settings or ConfigFileSettings()
        return cls(path, encoding=settings.encoding, metrics_hook=metrics_hook)

    @classmethod
    def from_file(
        cls,
        path: Path,
        settings: ConfigFileSettings | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> "ToolVersions":
        settings = settings or ConfigFileSettings()
        logger.debug("Parsing tool-versions: %s", path)
        with timed(metrics_hook, names.TOOL_VERSIONS_PARSE_DURATION, _LABELS):
            try:
                text = path.read_text(encoding=settings.encoding)
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Cannot read tool-versions file: %s (%s)", path, exc)
                metrics_hook.increment(
                    names.TOOL_VERSIONS_IO_ERRORS_TOTAL,
                    labels={**_LABELS, "op": "read"},
                )
                raise ConfigFileIOError("read", path) from exc

            tv = cls.parse_str(text)

        tv.path = path
        tv._encoding = settings.encoding
        tv.metrics_hook = metrics_hook
        metrics_hook.record_gauge(
            names.TOOL_VERSIONS_ENTRIES, len(tv._plugins), labels=_LABELS
        )
        return tv

    @classmethod
    def parse_str(cls, s: str) -> "ToolVersions":
        pre = ""
        for line in _lines(s):
            if not _is_comment(line):
                break
            pre += line + "\n"

        return cls(pre=pre, plugins=cls._parse_plugins(s))

    @staticmethod
    def _parse_plugins(s: str) -> dict[str, ToolVersionPlugin]:
        plugins: dict[str, ToolVersionPlugin] = {}
        for line in _lines(s):
            if _is_comment(line):
                # belongs to whichever entry is last in order; leading
                # comments with no entry yet are already in the preamble
                if plugins:
                    prev = next(reversed(plugins.values()))
                    prev.post += line + "\n"
                continue

            data, _, comment = line.partition("#")
            parts = [p for p in _SPLIT_RE.split(data) if p]
            if not parts:
                continue

            # legacy files sometimes read `ruby: 3.0.5`; the colon is dropped
            # for good once the file is saved again
            plugin = parts[0].rstrip(":")
            plugins[plugin] = ToolVersionPlugin(
                versions=parts[1:],
                post=f" #{comment}\n" if comment else "\n",
            )
        return plugins

    def _get_or_create_plugin(self, plugin: str) -> ToolVersionPlugin:
        return self._plugins.setdefault(plugin, ToolVersionPlugin())

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"ToolVersions(path={self.path!r}, plugins={self.plugins()!r})"

    # ----- ConfigFile -----

    def get_type(self) -> ConfigFileType:
        return ConfigFileType.TOOL_VERSIONS

    def get_path(self) -> Path | None:
        return self.path

    def source(self) -> PluginSource:
        return PluginSource(ConfigFileType.TOOL_VERSIONS, self.path)

    def plugins(self) -> dict[str, list[str]]:
        # copies, so callers cannot mutate the document through the snapshot
        return {name: list(tvp.versions) for name, tvp in self._plugins.items()}

    def env(self) -> dict[str, str]:
        return {}

    def remove_plugin(self, plugin: str) -> None:
        if self._plugins.pop(plugin, None) is not None:
            logger.debug("Removed plugin: %s", plugin)

    def add_version(self, plugin: str, version: str) -> None:
        logger.debug("Adding version: plugin=%s, version=%s", plugin, version)
        self._get_or_create_plugin(plugin).versions.append(version)

    def replace_versions(self, plugin: str, versions: list[str]) -> None:
        self._get_or_create_plugin(plugin).versions.clear()
        for version in versions:
            self.add_version(plugin, version)

    def save(self) -> None:
        if self.path is None:
            raise ValueError("Cannot save tool-versions document without a path")

        with timed(self.metrics_hook, names.TOOL_VERSIONS_SAVE_DURATION, _LABELS):
            try:
                # encode first so an unencodable document never truncates the
                # file; bytes also keep "\n" endings on every platform
                data = self.dump().encode(self._encoding)
                self.path.write_bytes(data)
            except (OSError, UnicodeEncodeError) as exc:
                logger.error(
                    "Cannot write tool-versions file: %s (%s)", self.path, exc
                )
                self.metrics_hook.increment(
                    names.TOOL_VERSIONS_IO_ERRORS_TOTAL,
                    labels={**_LABELS, "op": "write"},
                )
                raise ConfigFileIOError("write", self.path) from exc

        logger.debug("Saved tool-versions: %s", self.path)

    def dump(self) -> str:
        s = self.pre
        for plugin, tvp in self._plugins.items():
            s += f"{plugin} {' '.join(tvp.versions)}{tvp.post}"
        return _TRAILING_RE.sub("", s) + "\n"
