"""
Unit tests for signed auth tokens (tokens.py).
"""

from django.contrib.auth.models import User
from django.test import TestCase, RequestFactory, override_settings

from accounts.tokens import issue_token, read_token, InvalidToken, SignedTokenAuthentication


class TokenTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='t@example.com', email='t@example.com', password='x')

    def test_round_trip(self):
        self.assertEqual(read_token(issue_token(self.user)), self.user.pk)

    def test_tampered_token(self):
        token = issue_token(self.user)
        with self.assertRaises(InvalidToken):
            read_token(token + 'x')

    def test_expired_token(self):
        token = issue_token(self.user)
        with self.assertRaises(InvalidToken):
            read_token(token, max_age=-1)

    @override_settings(AUTH_TOKEN_MAX_AGE=-1)
    def test_max_age_from_settings(self):
        token = issue_token(self.user)
        with self.assertRaises(InvalidToken):
            read_token(token)

    @override_settings(SECRET_KEY='another-secret')
    def test_token_from_other_secret_rejected(self):
        token = issue_token(self.user)
        with override_settings(SECRET_KEY='virtualvault-test-secret-key'):
            with self.assertRaises(InvalidToken):
                read_token(token)


class SignedTokenAuthenticationTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='a@example.com', email='a@example.com', password='x')
        self.factory = RequestFactory()
        self.auth = SignedTokenAuthentication()

    def test_no_header(self):
        self.assertIsNone(self.auth.authenticate(self.factory.get('/')))

    def test_raw_header(self):
        token = issue_token(self.user)
        request = self.factory.get('/', HTTP_AUTHORIZATION=token)
        self.assertEqual(self.auth.authenticate(request), (self.user, token))

    def test_bearer_header(self):
        token = issue_token(self.user)
        request = self.factory.get('/', HTTP_AUTHORIZATION=f'Bearer {token}')
        self.assertEqual(self.auth.authenticate(request), (self.user, token))

    def test_unknown_scheme(self):
        request = self.factory.get('/', HTTP_AUTHORIZATION='Basic abc def')
        self.assertIsNone(self.auth.authenticate(request))

    def test_deleted_user(self):
        token = issue_token(self.user)
        self.user.delete()
        request = self.factory.get('/', HTTP_AUTHORIZATION=token)
        self.assertIsNone(self.auth.authenticate(request))

    def test_authenticate_header(self):
        self.assertEqual(self.auth.authenticate_header(self.factory.get('/')), 'Bearer')
