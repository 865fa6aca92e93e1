# fatamorgana

Domain models and request helpers for a web service that handles task
orders, wallets, group buys, lottery periods and a weekly leaderboard.
The package provides the data types, the business rules around them and
small, framework-free helpers for authorization headers, CORS headers,
rate limiting and pagination that can be wired into any server.

## Installation

```
pip install fatamorgana
```

To run the test suite:

```
pip install "fatamorgana[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `fatamorgana.order` | `Order`, `OrderStatus`, `TaskStatus`, `OrderStatusType`, `PaginationInfo`, `OrderValidationError`, `task_status_name`, `status_for_type`, `status_type_name` |
| `fatamorgana.lottery_period` | `LotteryPeriod`, `LotteryPeriodStatus`, `PurchaseConfig`, `PeriodListEntry` |
| `fatamorgana.leaderboard` | `LeaderboardEntry`, `LeaderboardResponse`, `week_start`, `week_end`, `current_week_range`, `mask_username` |
| `fatamorgana.group_buy` | `GroupBuy`, `GroupBuyDetail`, `GroupBuyStatus`, `GroupBuyType` |
| `fatamorgana.wallet` | `Wallet`, `WalletStatus`, `InsufficientBalanceError` |
| `fatamorgana.transaction` | `WalletTransaction`, `TransactionType`, `TransactionStatus`, `WithdrawSummary` |
| `fatamorgana.user` | `User` (bcrypt password hashing and checking), `UserStatus`, `BankCardInfo` |
| `fatamorgana.login_log` | `UserLoginLog` |
| `fatamorgana.admin` | `AdminUser`, `AdminRole`, `validate_role_id`, `role_id_by_name` |
| `fatamorgana.amount_config` | `AmountConfig`, `AmountConfigType` |
| `fatamorgana.announcement` | `Announcement`, `AnnouncementBanner` |
| `fatamorgana.member_level` | `MemberLevel` |
| `fatamorgana.message` | `Message`, `UserMessage` (JSON to and from text), `MessageStatus`, `MessageType` |
| `fatamorgana.operation_failure` | `OperationFailure`, `OperationType`, `coerce_json_bytes` |
| `fatamorgana.cors` | `cors_headers`, `is_preflight` |
| `fatamorgana.rate_limit` | `RateLimiter`, `account_key` |
| `fatamorgana.pagination` | `Pagination`, `RequestError`, `coerce_user_id`, `parse_user_id_param` |
| `fatamorgana.auth` | `AuthContext`, `parse_bearer_token`, `classify_token_error` |

Methods that depend on the clock (`Order.is_expired`, `Order.remaining_seconds`,
`LotteryPeriod.current_status`, `Wallet.touch`, `AuthContext.login_status` and
others) take an optional `now` argument and use the current time when it is
left out.

## Examples

Validating an order and preparing its task statuses:

```python
from datetime import datetime, timedelta
from fatamorgana.order import Order, OrderValidationError

now = datetime.now()
order = Order(order_no="ORD1", uid="10000001", period_number="P1",
              amount=100.0, profit_amount=5.0, expire_time=now + timedelta(hours=1),
              like_count=3)
order.validate()
order.initialize_task_statuses()
print(order.to_response(now)["like_status_name"])
```

`Order.validate()` raises `OrderValidationError`, whose `reason` names the
failed rule (for example `"order_amount_invalid"` or `"task_count_invalid"`).

Moving money in a wallet:

```python
from fatamorgana.wallet import Wallet, InsufficientBalanceError

wallet = Wallet(uid="10000001")
wallet.recharge(50.0)
try:
    wallet.withdraw(80.0)
except InsufficientBalanceError as exc:
    print(exc)
```

Rate limiting by account, falling back to the client address:

```python
from datetime import timedelta
from fatamorgana.rate_limit import RateLimiter, account_key

limiter = RateLimiter(limit=10, window=timedelta(minutes=1))
key = account_key(b'{"account": "user@example.com"}', "127.0.0.1")
if not limiter.allow(key):
    print("too many requests")
```

Reading a bearer token from a header:

```python
from fatamorgana.auth import parse_bearer_token, classify_token_error

token_value = parse_bearer_token("Bearer token")
```

`parse_bearer_token` returns `None` when there is no header and raises
`fatamorgana.pagination.RequestError` (code 401, `error_code`
`"INVALID_TOKEN_FORMAT"`) when the header is not exactly `Bearer <token>`.

Week boundaries for the leaderboard:

```python
from datetime import datetime
from fatamorgana.leaderboard import week_start, week_end, mask_username

start = week_start(datetime(2024, 1, 10, 15, 30))
print(start, week_end(start), mask_username("alice"))
```

`week_start` steps back to Monday midnight for Monday through Saturday; for a
Sunday it steps back seven days, to the previous Sunday.

## What this package does not do

- It runs no HTTP server and defines no routes; the CORS, auth, rate-limit and
  pagination helpers return values and raise errors for your own server to use.
- It stores nothing: there is no database or cache layer, and the models are
  plain dataclasses held in memory.
- It does not issue or verify tokens; `parse_bearer_token` only extracts the
  token text and `classify_token_error` only maps an error message to a client
  message and code.