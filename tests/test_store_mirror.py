"""Tests for the remote mirror client."""

import unittest
from unittest.mock import MagicMock, Mock

import requests

from reponotes.exceptions import MirrorApiError, MirrorAuthError, MirrorRateLimited
from reponotes.models import MirrorNote
from reponotes.store.mirror import HttpNotesMirror

BASE_URL = "https://mirror.example.com/"
NOTES_URL = "https://mirror.example.com/api/github/notes"


def _response(status_code=200, body=None, headers=None):
    resp = Mock()
    resp.status_code = status_code
    resp.headers = headers or {}
    resp.text = "" if body is None else str(body)
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


class HttpNotesMirrorTest(unittest.TestCase):
    """Tests for HttpNotesMirror."""

    def setUp(self):
        self.session = MagicMock()
        self.mirror = HttpNotesMirror(BASE_URL, session=self.session)

    def test_url(self):
        self.assertEqual(self.mirror.url, NOTES_URL)
        custom = HttpNotesMirror("http://h", session=self.session, path="notes")
        self.assertEqual(custom.url, "http://h/notes")

    def test_submit_posts_repo_and_note(self):
        self.session.post.return_value = _response(body={"success": True})
        self.assertTrue(self.mirror.submit("a/b", "hello"))
        self.session.post.assert_called_once_with(
            NOTES_URL, json={"repo": "a/b", "note": "hello"}, timeout=10.0
        )

    def test_submit_reports_unsuccessful_result(self):
        self.session.post.return_value = _response(body={"success": False})
        self.assertFalse(self.mirror.submit("a/b", "hello"))

    def test_submit_rejects_empty_repo_without_request(self):
        with self.assertRaises(MirrorApiError):
            self.mirror.submit("", "hello")
        self.session.post.assert_not_called()

    def test_bad_request(self):
        self.session.post.return_value = _response(400, {"error": "Invalid input"})
        with self.assertRaises(MirrorApiError) as ctx:
            self.mirror.submit("a/b", "x")
        self.assertEqual(ctx.exception.payload, {"error": "Invalid input"})

    def test_auth_errors(self):
        for code in (401, 403):
            self.session.post.return_value = _response(code, {})
            with self.assertRaises(MirrorAuthError):
                self.mirror.submit("a/b", "x")

    def test_rate_limited(self):
        self.session.post.return_value = _response(429, {}, {"Retry-After": "3"})
        with self.assertRaises(MirrorRateLimited) as ctx:
            self.mirror.submit("a/b", "x")
        self.assertEqual(ctx.exception.retry_after, 3.0)

    def test_network_failure(self):
        self.session.post.side_effect = requests.ConnectionError("down")
        with self.assertRaises(MirrorApiError):
            self.mirror.submit("a/b", "x")

    def test_invalid_json_response(self):
        self.session.post.return_value = _response(body=ValueError("no json"))
        with self.assertRaises(MirrorApiError):
            self.mirror.submit("a/b", "x")

    def test_unexpected_submit_response(self):
        self.session.post.return_value = _response(body=["not", "an", "object"])
        with self.assertRaises(MirrorApiError):
            self.mirror.submit("a/b", "x")

    def test_fetch_all(self):
        self.session.get.return_value = _response(
            body=[{"repo": "a/b", "note": "one"}, {"repo": "c/d", "note": ""}]
        )
        notes = self.mirror.fetch_all()
        self.assertEqual(
            notes, [MirrorNote(repo="a/b", note="one"), MirrorNote(repo="c/d", note="")]
        )
        self.session.get.assert_called_once_with(NOTES_URL, timeout=10.0)

    def test_fetch_all_invalid_payload(self):
        self.session.get.return_value = _response(body={"repo": "a/b"})
        with self.assertRaises(MirrorApiError):
            self.mirror.fetch_all()


if __name__ == "__main__":
    unittest.main()
