"""
Admin Auth Gate
===============

Two states: anonymous and authenticated. The only way in is login() with
the shared admin password; the way out is logout() or cookie expiry.
"""

import hmac
from functools import wraps

from flask import current_app, g, redirect, request
from werkzeug.wrappers import Response

from ...core.logging_service import logger
from ...core.session import SessionCodec

LOGIN_FAILED_MESSAGE = 'The password is incorrect.'


class AdminAuth:

    def __init__(self, config, login_url='/admin/login'):
        self.config = config
        self.login_url = login_url
        self.codec = SessionCodec(
            config.session_secret,
            max_age=config.max_age,
            cookie_name=config.cookie_name,
            secure=config.secure,
        )

    def _claims(self, req):
        return self.codec.decode(req.cookies.get(self.codec.cookie_name))

    def is_logged_in(self, req):
        """Non-redirecting check"""
        return self._claims(req).get('is_admin') is True

    def require_admin(self, req):
        """Return the session claims, or a redirect response to the login page"""
        claims = self._claims(req)
        if claims.get('is_admin') is not True:
            return redirect(self.login_url)
        return claims

    def login(self, req, password):
        """Check the password and hand back the Set-Cookie header for a fresh admin session"""
        expected = self.config.admin_password
        supplied = password or ''

        if not expected or not self.codec.has_secret:
            logger.warning('auth', 'Admin login attempted without ADMIN_PASSWORD or SESSION_SECRET configured')
            return {'error': LOGIN_FAILED_MESSAGE}

        if not hmac.compare_digest(supplied.encode(), expected.encode()):
            logger.log_security_event('Failed admin login attempt')
            return {'error': LOGIN_FAILED_MESSAGE}

        claims = self._claims(req)
        claims['is_admin'] = True
        logger.info('auth', 'Admin logged in')
        return {
            'success': True,
            'headers': {'Set-Cookie': self.codec.cookie_header(self.codec.encode(claims))},
        }

    def logout(self, req):
        """Set-Cookie header that destroys the session, whatever state it was in"""
        if self.is_logged_in(req):
            logger.info('auth', 'Admin logged out')
        return {'headers': {'Set-Cookie': self.codec.clear_cookie_header()}}


def get_auth():
    return current_app.extensions['folio'].auth


def _apply_headers(response, headers):
    for name, value in headers.items():
        response.headers.add(name, value)
    return response


def logout_response(req, location='/'):
    result = get_auth().logout(req)
    return _apply_headers(redirect(location), result['headers'])


def admin_required(f):
    """Decorator to require an admin session on a single view"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if request.method == 'POST' and request.form.get('_action') == 'logout':
            return logout_response(request)

        result = get_auth().require_admin(request)
        if isinstance(result, Response):
            return result
        g.admin_session = result
        return f(*args, **kwargs)
    return decorated_function


def install_admin_gate(blueprint, exempt=()):
    """
    Gate every view of an admin blueprint. Runs before the view, so an
    anonymous request never reaches a mutation. A POST carrying
    _action=logout is answered here for every gated route.
    """
    exempt_endpoints = {f'{blueprint.name}.{name}' for name in exempt}

    @blueprint.before_request
    def _gate():
        if request.endpoint in exempt_endpoints:
            return None

        # Logout clears the cookie whatever state the session is in
        if request.method == 'POST' and request.form.get('_action') == 'logout':
            return logout_response(request)

        result = get_auth().require_admin(request)
        if isinstance(result, Response):
            return result
        g.admin_session = result
        return None

    return blueprint
