import textwrap

import pytest

from structured_gettext.core.errors import PayloadFormatError, ValueShapeError
from structured_gettext.core.resolver import Resolver
from structured_gettext.core.utils import json_yaml
from structured_gettext.core.values import GetText, Keyword, Text


def _yaml(text: str) -> str:
    return textwrap.dedent(text).strip() + "\n"


@pytest.mark.parametrize(
    "payload, expected",
    [
        ('{"text": "Hello!"}', "Hello!"),
        ('{"text": "Hello %s!", "args": ["Grace"]}', "Hello Grace!"),
        ('{"text": "Hello %(name)s!", "args": {"name": "Grace"}}', "Hello Grace!"),
        ('{"gettext": "The answer is: %(answer)s", "args": {"answer": 42}}', "The answer is: 42"),
        ('{"gettext": "Pi is: %(pi)s", "args": {"pi": 3.14}}', "Pi is: 3.14"),
        ('{"gettext": "The answer is: %(answer)s", "args": {"answer": true}}', "The answer is: yes"),
        ('{"gettext": "The answer is: %(answer)s", "args": {"answer": null}}', "The answer is: n/a"),
        ('{"gettext": "%(greetings)s", "args": {"greetings": [", ", "Hello", "World!"]}}', "Hello, World!"),
        (
            '{"ngettext": {"singular": "%s element", "plural": "%s elements", "n": 2}, "args": [2]}',
            "2 elements",
        ),
    ],
)
def test_json_messages(resolver: Resolver, payload, expected):
    assert resolver.resolve(json_yaml.load_message(payload, "json")) == expected


def test_yaml_messages(resolver: Resolver):
    recursive = _yaml(
        """
        ---
        gettext: "%(greetings)s"
        args:
            greetings:
                gettext: "Hello %(name)s!"
                args:
                    name: Grace
        """
    )
    singular = _yaml(
        """
        ---
        ngettext:
            singular: "%s element"
            plural: "%s elements"
            n: 1
        args:
            - 1
        """
    )
    null_arg = _yaml(
        """
        gettext: "The answer is: %(answer)s"
        args:
            answer: ~
        """
    )
    assert resolver.resolve(json_yaml.load_message(recursive, "yaml")) == "Hello Grace!"
    assert resolver.resolve(json_yaml.load_message(singular, "yaml")) == "1 element"
    assert resolver.resolve(json_yaml.load_message(null_arg, "yaml")) == "The answer is: n/a"


def test_auto_detection_loads_both_formats():
    expected = GetText("Hello %(name)s!", Keyword({"name": Text("Grace")}))
    assert json_yaml.load_message('{"gettext": "Hello %(name)s!", "args": {"name": "Grace"}}') == expected
    assert json_yaml.load_message("gettext: Hello %(name)s!\nargs:\n  name: Grace\n") == expected


def test_load_message_errors():
    with pytest.raises(json_yaml.JsonValidationError):
        json_yaml.load_message("{broken", "json")
    with pytest.raises(json_yaml.YamlValidationError):
        json_yaml.load_message(": broken: [", "yaml")
    with pytest.raises(PayloadFormatError):
        json_yaml.load_message("plain text value")
    with pytest.raises(PayloadFormatError):
        json_yaml.load_message("{}", "toml")
    with pytest.raises(ValueShapeError):
        json_yaml.load_message('{"unknown": "shape"}')


def test_validate_message():
    valid = json_yaml.validate_message('{"gettext": "Hello!"}')
    assert valid.is_valid and valid.message == GetText("Hello!")

    invalid = json_yaml.validate_message('{"gettext": 1}')
    assert not invalid.is_valid
    assert invalid.error
    assert invalid.message is None


def test_auto_detect_json_yaml_unknown():
    json_result = json_yaml.detect_payload_format('{"foo": 1}')
    assert json_result.format == "json" and json_result.data == {"foo": 1}

    yaml_result = json_yaml.detect_payload_format("foo: bar\nitems:\n  - 1\n")
    assert yaml_result.format == "yaml"
    assert yaml_result.data == {"foo": "bar", "items": [1]}

    unknown_result = json_yaml.detect_payload_format("plain text value")
    assert unknown_result.format == "unknown"
    assert unknown_result.data is None
    assert not unknown_result.is_detected
