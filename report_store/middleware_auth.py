import logging
import re
from functools import wraps

import jwt
from flask import g, request

logger = logging.getLogger(__name__)

BEARER_PATTERN = re.compile(r'Bearer\s+(.+)', re.IGNORECASE)


class BearerTokenMiddleware:
    """Переносит bearer-токен клиента в контекст запроса.

    Подпись токена не проверяется и запросы без токена не отклоняются:
    claims читаются только для того, чтобы подписать записи в логе.
    """

    def carry_token(self, f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            g.token = None
            g.token_subject = None

            auth_header = request.headers.get('Authorization')
            bearer_match = BEARER_PATTERN.match(auth_header) if auth_header else None
            if bearer_match:
                token = bearer_match.group(1).strip()
                g.token = token
                g.token_subject = self.unverified_subject(token)

            return f(*args, **kwargs)

        return decorated_function

    @staticmethod
    def unverified_subject(token):
        try:
            payload = jwt.decode(token, options={"verify_signature": False})
        except jwt.InvalidTokenError as e:
            logger.debug(f"Bearer token is not a readable JWT: {e}")
            return None
        return payload.get('preferred_username') or payload.get('sub')
