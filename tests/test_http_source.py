import unittest
from unittest.mock import MagicMock

import requests

from jsonmend.http_source import HttpSource


def _response(status_code: int, text: str = "") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    resp.encoding = "utf-8"
    return resp


class HttpSourceTest(unittest.TestCase):
    def _source(self, token: str | None = "") -> tuple[HttpSource, MagicMock]:
        session = MagicMock()
        return HttpSource(token=token, timeout_seconds=7, session=session), session

    def test_fetch_returns_body_and_sends_token(self):
        source, session = self._source(token="secret")
        session.get.return_value = _response(200, '{"k": 1,}')

        self.assertEqual(source.fetch("http://example.invalid/data"), '{"k": 1,}')
        _, kwargs = session.get.call_args
        self.assertEqual(kwargs["timeout"], 7)
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer secret")

    def test_no_token_no_authorization_header(self):
        source, session = self._source(token="")
        session.get.return_value = _response(204)
        source.fetch("http://example.invalid/data")
        _, kwargs = session.get.call_args
        self.assertNotIn("Authorization", kwargs["headers"])

    def test_default_session_is_a_requests_session(self):
        source = HttpSource(token="")
        self.assertIsInstance(source.session, requests.Session)

    def test_non_2xx_raises(self):
        source, session = self._source()
        session.get.return_value = _response(503, "busy")
        with self.assertRaises(RuntimeError):
            source.fetch("http://example.invalid/data")

    def test_transport_error_is_wrapped(self):
        source, session = self._source()
        session.get.side_effect = requests.ConnectionError("connection refused")
        with self.assertRaises(RuntimeError) as ctx:
            source.fetch("http://example.invalid/data")
        self.assertIn("connection refused", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
