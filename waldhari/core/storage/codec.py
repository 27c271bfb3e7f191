"""pydantic 模型与 XML 之间的转换。

- 根元素以模型类名命名，每个字段一个子元素
- 嵌套模型为嵌套元素
- 列表元素带 type="list"，每一项为 <item> 子元素
- None 为带 nil="true" 的空元素
- 空映射带 type="object"

解码时把元素树还原为字典，再交给 pydantic 校验，
数值、布尔值、日期等由 pydantic 从文本转换。
"""

from __future__ import annotations

from typing import Any, TypeVar
import xml.etree.ElementTree as ET

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)

LIST_ITEM_TAG = "item"


def _fill(element: ET.Element, value: Any) -> None:
    if value is None:
        element.set("nil", "true")
    elif isinstance(value, dict):
        if not value:
            element.set("type", "object")
        for key, child_value in value.items():
            if not isinstance(key, str) or not key.isidentifier():
                raise ValueError(f"无法作为 XML 元素名的键: {key!r}")
            _fill(ET.SubElement(element, key), child_value)
    elif isinstance(value, list):
        element.set("type", "list")
        for item in value:
            _fill(ET.SubElement(element, LIST_ITEM_TAG), item)
    elif isinstance(value, bool):
        element.text = "true" if value else "false"
    else:
        element.text = str(value)


def _read(element: ET.Element) -> Any:
    if element.get("nil") == "true":
        return None
    kind = element.get("type")
    if kind == "list":
        return [_read(child) for child in element]
    if kind == "object" or len(element):
        return {child.tag: _read(child) for child in element}
    return element.text or ""


def model_to_element(model: BaseModel) -> ET.Element:
    """把模型转换为 XML 元素。"""
    root = ET.Element(type(model).__name__)
    _fill(root, model.model_dump(mode="json"))
    return root


def element_to_model(element: ET.Element, model: type[M]) -> M:
    """把 XML 元素还原为模型。
    
    Raises:
        pydantic.ValidationError: 数据不符合模型定义
    """
    data = _read(element)
    if not isinstance(data, dict):
        data = {}
    return model.model_validate(data)


def dumps(model: BaseModel) -> str:
    """序列化为 XML 文本。"""
    element = model_to_element(model)
    ET.indent(element)
    return ET.tostring(element, encoding="unicode")


def loads(text: str, model: type[M]) -> M:
    """从 XML 文本反序列化。"""
    return element_to_model(ET.fromstring(text), model)


__all__ = [
    "dumps",
    "element_to_model",
    "loads",
    "model_to_element",
]
