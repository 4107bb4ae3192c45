"""Plain-data dumps of parsed pages (dict, JSON, YAML)"""

import json
from typing import Any, Dict, List, Sequence, Union

import yaml

from pdml.errors import NestingTooDeepError
from pdml.types.element import Element
from pdml.types.page import Page
from pdml.types.quantifier import Quantifier, QuantifierKind


def quantifier_to_value(quantifier: Quantifier) -> Union[str, int]:
    if quantifier.kind is QuantifierKind.FIXED:
        return quantifier.count
    return quantifier.kind.value


def element_to_dict(element: Element) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if element.identifier is not None:
        data['identifier'] = element.identifier
    data['selector'] = element.selector
    data['quantifier'] = quantifier_to_value(element.quantifier)
    if element.children is not None:
        data['children'] = [element_to_dict(child) for child in element.children]
    return data


def page_to_dict(page: Page) -> Dict[str, Any]:
    return {
        'url': page.url,
        'name': page.name,
        'elements': [element_to_dict(element) for element in page.elements],
    }


def pages_to_dicts(pages: Sequence[Page]) -> List[Dict[str, Any]]:
    try:
        return [page_to_dict(page) for page in pages]
    except RecursionError as e:
        raise NestingTooDeepError(e) from e


def pages_to_json(pages: Sequence[Page], indent: int = 2) -> str:
    return json.dumps(pages_to_dicts(pages), indent=indent, ensure_ascii=False)


def pages_to_yaml(pages: Sequence[Page]) -> str:
    return yaml.dump(pages_to_dicts(pages), default_flow_style=False, allow_unicode=True, sort_keys=False)


def dump_pages(pages: Sequence[Page], output_format: str = "json") -> str:
    if output_format == "yaml":
        return pages_to_yaml(pages)
    if output_format == "json":
        return pages_to_json(pages)
    raise ValueError(f"Unknown output format: {output_format}")
