"""Redis key layout."""

SESSION_KEY_PREFIX = "session:"
SESSION_TOKEN_KEY_PREFIX = "session:token:"
ACCOUNT_SESSIONS_KEY_PREFIX = "account:sessions:"

# 한도 초과 / 토큰 중복 (add 스크립트 반환값)
ADD_LIMIT_REACHED = -1
ADD_DUPLICATE_TOKEN = -2
