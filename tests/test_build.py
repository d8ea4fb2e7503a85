import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from htmldoc.build import build_document, example_document, load_document_spec
from htmldoc.models import DocumentSpec, ElementSpec, TextSpec


def test_example_document_matches_reference_output() -> None:
    assert example_document().get_html() == (
        "<!DOCTYPE html>\n"
        '<html><body><a href="http://unlicense.org/">Click on me!</a>'
        "<p>Hello world!</p></body></html>\n"
    )


def test_build_document_from_models() -> None:
    spec = DocumentSpec(
        attributes=[{"name": "lang", "value": "en"}],
        children=[
            ElementSpec(tag="head", children=[ElementSpec(tag="title", children=[TextSpec(text="Hi")])]),
            ElementSpec(tag="body", attributes={"class": "main"}),
        ],
    )

    html = build_document(spec).get_html()

    assert html == (
        '<!DOCTYPE html>\n<html lang="en"><head><title>Hi</title></head>'
        '<body class="main" /></html>\n'
    )


def test_mapping_attributes_keep_order() -> None:
    spec = ElementSpec.model_validate({"tag": "a", "attributes": {"href": "/", "rel": "home", "title": None}})
    assert [(attr.name, attr.value) for attr in spec.attributes] == [
        ("href", "/"),
        ("rel", "home"),
        ("title", ""),
    ]


def test_children_dispatch_on_shape() -> None:
    spec = DocumentSpec.model_validate(
        {"children": [{"text": "a"}, {"tag": "br"}, {"text": "b", "escape": True}]}
    )
    assert [type(child) for child in spec.children] == [TextSpec, ElementSpec, TextSpec]


def test_escape_flag_pre_escapes_before_the_tree() -> None:
    spec = DocumentSpec.model_validate(
        {
            "children": [
                {
                    "tag": "body",
                    "attributes": [{"name": "title", "value": 'a<b & "c"', "escape": True}],
                    "children": [
                        {"text": "<b>raw</b>"},
                        {"text": "<b>safe</b>", "escape": True},
                    ],
                }
            ]
        }
    )

    html = build_document(spec).root().render()

    assert html == (
        '<html><body title="a&lt;b &amp; &quot;c&quot;">'
        "<b>raw</b>&lt;b&gt;safe&lt;/b&gt;</body></html>"
    )


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ValidationError):
        DocumentSpec.model_validate({"children": [{"tag": "p", "style": "x"}]})


def test_empty_tag_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ElementSpec.model_validate({"tag": ""})


def test_load_yaml_description(tmp_path: Path) -> None:
    path = tmp_path / "doc.yaml"
    path.write_text(
        "children:\n"
        "  - tag: body\n"
        "    children:\n"
        "      - tag: p\n"
        "        children:\n"
        "          - text: Hello world!\n",
        encoding="utf-8",
    )

    document = build_document(load_document_spec(path))

    assert document.root().render() == "<html><body><p>Hello world!</p></body></html>"


def test_load_json_description(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({"children": [{"tag": "body", "attributes": {"id": "x"}}]}), encoding="utf-8")

    document = build_document(load_document_spec(path))

    assert document.get_html() == '<!DOCTYPE html>\n<html><body id="x" /></html>\n'


def test_empty_yaml_file_is_an_empty_document(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert build_document(load_document_spec(path)).get_html() == "<!DOCTYPE html>\n<html />\n"


def test_deeply_nested_description_builds() -> None:
    depth = 3000
    spec: ElementSpec | TextSpec = TextSpec(text="deep")
    for _ in range(depth):
        spec = ElementSpec(tag="div", children=[spec])

    document = build_document(DocumentSpec(children=[spec]))

    assert document.root().render() == "<html>" + "<div>" * depth + "deep" + "</div>" * depth + "</html>"


def test_mapping_and_list_attributes_both_reject_non_strings() -> None:
    with pytest.raises(ValidationError):
        ElementSpec.model_validate({"tag": "script", "attributes": {"async": True}})
    with pytest.raises(ValidationError):
        ElementSpec.model_validate({"tag": "img", "attributes": {"width": 100}})
    with pytest.raises(ValidationError):
        ElementSpec.model_validate({"tag": "img", "attributes": [{"name": "width", "value": 100}]})


def test_quoted_yaml_values_are_accepted_in_mapping_form(tmp_path: Path) -> None:
    path = tmp_path / "doc.yaml"
    path.write_text(
        "children:\n  - tag: script\n    attributes: {async: 'true', width: '100', defer: null}\n",
        encoding="utf-8",
    )

    html = build_document(load_document_spec(path)).root().render()

    assert html == '<html><script async="true" width="100" defer="" /></html>'
