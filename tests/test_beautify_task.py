from __future__ import annotations

import json
import unittest

from interfaces.errors import ResponseFormatError, TransportError
from interfaces.llm.tasks import BeautifyResult, Change
from nlp.llm.tasks.beautify import SCHEMA, SYSTEM, beautify_source, build_request, parse_response


class _FakeClient:
    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    def json_schema_chat(self, system, user, max_tokens, schema, temperature=None) -> str:
        self.calls.append(
            {"system": system, "user": user, "max_tokens": max_tokens, "schema": schema, "temperature": temperature}
        )
        if self.error is not None:
            raise self.error
        return self.reply


class TestBuildRequest(unittest.TestCase):
    def test_fixed_instruction_and_schema(self) -> None:
        req = build_request("x=1", max_tokens=512)
        self.assertEqual(req.system, SYSTEM)
        self.assertEqual(req.user, "x=1")
        self.assertEqual(req.temperature, 0.2)
        self.assertEqual(req.max_tokens, 512)
        self.assertEqual(req.schema["required"], ["formattedText", "changes"])
        self.assertEqual(req.schema["properties"]["changes"]["items"]["required"], ["lineNumber", "explanation"])

    def test_empty_source_passes_through(self) -> None:
        self.assertEqual(build_request("", max_tokens=1).user, "")

    def test_instruction_mentions_formatted_line_numbers(self) -> None:
        self.assertIn("formatted code", SYSTEM)
        self.assertIn("PEP 8", SYSTEM)


class TestParseResponse(unittest.TestCase):
    def test_zero_changes(self) -> None:
        out = parse_response('{"formattedText":"x=1\\n","changes":[]}')
        self.assertEqual(out, BeautifyResult(formatted_text="x=1\n", changes=()))

    def test_changes_kept_in_reply_order(self) -> None:
        raw = json.dumps(
            {
                "formattedText": "a = 1\nb = 2\n",
                "changes": [
                    {"lineNumber": 2, "explanation": "Spaces around ="},
                    {"lineNumber": 1, "explanation": "Spaces around ="},
                    {"lineNumber": 2, "explanation": "Trailing newline"},
                ],
            }
        )
        out = parse_response(raw)
        self.assertEqual([c.line_number for c in out.changes], [2, 1, 2])
        self.assertEqual(out.changes[2], Change(line_number=2, explanation="Trailing newline"))

    def test_not_json(self) -> None:
        with self.assertRaises(ResponseFormatError):
            parse_response("not json")

    def test_empty_reply(self) -> None:
        with self.assertRaises(ResponseFormatError):
            parse_response("")

    def test_missing_changes_is_not_defaulted(self) -> None:
        with self.assertRaises(ResponseFormatError):
            parse_response('{"formattedText":"x = 1\\n"}')

    def test_missing_formatted_text(self) -> None:
        with self.assertRaises(ResponseFormatError):
            parse_response('{"changes":[]}')

    def test_top_level_must_be_object(self) -> None:
        with self.assertRaises(ResponseFormatError):
            parse_response("[1, 2]")

    def test_wrong_field_types(self) -> None:
        bad = [
            '{"formattedText": 5, "changes": []}',
            '{"formattedText": "", "changes": {}}',
            '{"formattedText": "", "changes": ["x"]}',
            '{"formattedText": "", "changes": [{"lineNumber": "3", "explanation": "e"}]}',
            '{"formattedText": "", "changes": [{"lineNumber": true, "explanation": "e"}]}',
            '{"formattedText": "", "changes": [{"lineNumber": 0, "explanation": "e"}]}',
            '{"formattedText": "", "changes": [{"lineNumber": 1.5, "explanation": "e"}]}',
            '{"formattedText": "", "changes": [{"lineNumber": 1, "explanation": ""}]}',
            '{"formattedText": "", "changes": [{"explanation": "e"}]}',
            '{"formattedText": "", "changes": [{"lineNumber": 1}]}',
        ]
        for raw in bad:
            with self.subTest(raw=raw):
                with self.assertRaises(ResponseFormatError):
                    parse_response(raw)

    def test_integral_float_line_number(self) -> None:
        out = parse_response('{"formattedText": "x\\ny", "changes": [{"lineNumber": 2.0, "explanation": "e"}]}')
        self.assertEqual(out.changes[0].line_number, 2)
        self.assertIsInstance(out.changes[0].line_number, int)

    def test_whole_reply_in_code_fence(self) -> None:
        raw = '```json\n{"formattedText": "x = 1", "changes": []}\n```'
        self.assertEqual(parse_response(raw).formatted_text, "x = 1")

    def test_fence_inside_prose_is_not_unwrapped(self) -> None:
        raw = 'Here you go:\n```json\n{"formattedText": "x = 1", "changes": []}\n```'
        with self.assertRaises(ResponseFormatError):
            parse_response(raw)


class TestBeautifySource(unittest.TestCase):
    def test_round_trip_through_client(self) -> None:
        client = _FakeClient(reply='{"formattedText": "x = 1\\n", "changes": [{"lineNumber": 1, "explanation": "e"}]}')
        out = beautify_source(client, "x=1", max_tokens=100, temperature=0.2)
        self.assertEqual(out.formatted_text, "x = 1\n")
        self.assertEqual(len(client.calls), 1)
        call = client.calls[0]
        self.assertEqual(call["user"], "x=1")
        self.assertEqual(call["schema"], SCHEMA)
        self.assertEqual(call["temperature"], 0.2)
        self.assertEqual(call["max_tokens"], 100)

    def test_transport_error_propagates_unchanged(self) -> None:
        client = _FakeClient(error=TransportError("down"))
        with self.assertRaises(TransportError):
            beautify_source(client, "x=1", max_tokens=100)

    def test_malformed_reply_is_format_error(self) -> None:
        with self.assertRaises(ResponseFormatError):
            beautify_source(_FakeClient(reply="{oops"), "x=1", max_tokens=100)


if __name__ == "__main__":
    unittest.main()
