"""Session Store Lua Scripts.

각 변경은 하나의 스크립트로 실행되어 부분 반영된 레코드가 남지 않습니다.
"""

# 개수 확인 + 삽입 (원자적)
ADD_SESSION_SCRIPT = """
local account_key = KEYS[1]  -- account:sessions:{account_id}
local session_key = KEYS[2]  -- session:{session_id}
local token_key = KEYS[3]    -- session:token:{digest}

local count = redis.call('ZCARD', account_key)
if count >= tonumber(ARGV[1]) then
    return -1
end
if redis.call('EXISTS', token_key) == 1 then
    return -2
end

redis.call('SET', session_key, ARGV[4])
redis.call('SET', token_key, ARGV[2])
redis.call('ZADD', account_key, ARGV[3], ARGV[2])
return count + 1
"""

# 단건 제거 (ZREM 성공한 호출만 레코드 삭제)
REMOVE_SESSION_SCRIPT = """
local account_key = KEYS[1]
local session_key = KEYS[2]
local token_key = KEYS[3]

if redis.call('ZREM', account_key, ARGV[1]) == 0 then
    return 0
end
redis.call('DEL', session_key, token_key)
return 1
"""

# 계정 전체 제거
REMOVE_ALL_SESSIONS_SCRIPT = """
local account_key = KEYS[1]
local session_prefix = ARGV[1]
local token_prefix = ARGV[2]

local ids = redis.call('ZRANGE', account_key, 0, -1)
for _, id in ipairs(ids) do
    local session_key = session_prefix .. id
    local raw = redis.call('GET', session_key)
    if raw then
        local record = cjson.decode(raw)
        if record['token_digest'] then
            redis.call('DEL', token_prefix .. record['token_digest'])
        end
        redis.call('DEL', session_key)
    end
end
redis.call('DEL', account_key)
return #ids
"""
