"""Project config file loading.

The project config is an XML document kept next to the sources::

    <config xmlns="urn:tmclient:config:1.0">
      <url>https://tm.example.com/</url>
      <project>guide</project>
      <project-version>master</project-version>
      <project-type>properties</project-type>
      <src-dir>src/main/resources</src-dir>
      <trans-dir>target/l10n</trans-dir>
      <includes>**/*.properties</includes>
      <locales>
        <locale>de-DE</locale>
        <locale map-from="zh_CN">zh-Hans</locale>
      </locales>
      <hooks>
        <hook command="pull"><after>make messages</after></hook>
      </hooks>
      <rules>
        <rule pattern="**/*.properties">{path}/{filename}_{locale_with_underscore}.{extension}</rule>
      </rules>
    </config>

Element names are matched by local name, so the namespace is optional.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from tmclient.config.model import CommandHook, FileMappingRule, LocaleMapping, ProjectConfig
from tmclient.diagnostics import ConfigError, ErrorTemplate

__all__ = ["load_project_config", "parse_project_config"]

logger = logging.getLogger(__name__)


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _children(element: etree._Element, name: str) -> list[etree._Element]:
    """Direct child elements with the given local name (comments skipped)."""
    return [
        child
        for child in element
        if isinstance(child.tag, str) and _local_name(child) == name
    ]


def _child_text(element: etree._Element, name: str) -> str | None:
    found = _children(element, name)
    if not found or found[0].text is None:
        return None
    text = found[0].text.strip()
    return text or None


def _split_list(element: etree._Element, name: str, item_name: str) -> tuple[str, ...]:
    """Read a list given as comma-separated text or as repeated child elements."""
    found = _children(element, name)
    if not found:
        return ()
    container = found[0]
    items = [
        (item.text or "").strip() for item in _children(container, item_name)
    ]
    if container.text:
        items.extend(container.text.split(","))
    return tuple(item.strip() for item in items if item.strip())


def _parse_locales(root: etree._Element) -> tuple[LocaleMapping, ...]:
    found = _children(root, "locales")
    if not found:
        return ()
    mappings: list[LocaleMapping] = []
    for locale in _children(found[0], "locale"):
        locale_id = (locale.text or "").strip()
        if not locale_id:
            continue
        map_from = locale.get("map-from")
        mappings.append(LocaleMapping(locale_id, map_from.strip() if map_from else None))
    return tuple(mappings)


def _parse_hooks(root: etree._Element) -> tuple[CommandHook, ...]:
    found = _children(root, "hooks")
    if not found:
        return ()
    hooks: list[CommandHook] = []
    for hook in _children(found[0], "hook"):
        command = hook.get("command")
        if not command:
            logger.warning("Ignoring <hook> without a command attribute")
            continue
        hooks.append(
            CommandHook(
                command=command,
                before=tuple((e.text or "").strip() for e in _children(hook, "before")),
                after=tuple((e.text or "").strip() for e in _children(hook, "after")),
            )
        )
    return tuple(hooks)


def _parse_rules(root: etree._Element) -> tuple[FileMappingRule, ...]:
    found = _children(root, "rules")
    if not found:
        return ()
    return tuple(
        FileMappingRule(rule=(rule.text or "").strip(), pattern=rule.get("pattern") or None)
        for rule in _children(found[0], "rule")
    )


def parse_project_config(source: bytes | str, location: str = "<string>") -> ProjectConfig:
    """Parse project config XML.

    Args:
        source: XML document
        location: Where the document came from, for error messages

    Returns:
        Parsed ProjectConfig

    Raises:
        ConfigError: If the document is not well-formed XML
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
    try:
        root = etree.fromstring(source, parser)
    except etree.XMLSyntaxError as e:
        raise ConfigError(ErrorTemplate.project_config_invalid(location, str(e))) from e

    src_dir = _child_text(root, "src-dir")
    trans_dir = _child_text(root, "trans-dir")
    return ProjectConfig(
        url=_child_text(root, "url"),
        project=_child_text(root, "project"),
        project_version=_child_text(root, "project-version"),
        project_type=_child_text(root, "project-type"),
        src_dir=Path(src_dir) if src_dir else None,
        trans_dir=Path(trans_dir) if trans_dir else None,
        includes=_split_list(root, "includes", "include"),
        excludes=_split_list(root, "excludes", "exclude"),
        locales=_parse_locales(root),
        hooks=_parse_hooks(root),
        rules=_parse_rules(root),
    )


def load_project_config(path: Path) -> ProjectConfig:
    """Read and parse a project config file.

    Raises:
        ConfigError: If the file is not well-formed XML
        OSError: If the file cannot be read
    """
    logger.info("Loading project config from %s", path)
    return parse_project_config(path.read_bytes(), str(path))
