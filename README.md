# thinkbox

A collection of small, self-contained building blocks: algorithm helpers
and data structures, classic design patterns, thread-based concurrency
utilities, a SQLite helper with a uniform JSON response layer, chunked
file uploads, and Redis-based locking and sign-in calendars.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### Basics and algorithms

- `thinkbox.algorithms` – `quick_sort(items)` returns a new sorted list;
  `two_sum(nums, target)` returns the flattened index pairs of every two
  numbers adding up to `target`.
- `thinkbox.structures` – an insertion-ordered `Set` (`add(*elements)`,
  printed as comma-separated elements) and a max-priority `PriorityQueue`
  of `Item`s with `push`, `pop` and `len()`.
- `thinkbox.permissions` – bit-flag `Permission` values (`READ`, `CREATE`,
  `UPDATE`, `DELETE`) with `has_permission(role, permission)` and
  `show_permissions(role)`.
- `thinkbox.lucky` – `LuckyUser().set_range(low, high).run(num, timeout=2.0)`
  draws distinct ids from `[low, high)` until `num` are held or the timeout
  passes; the drawn ids are in `users`.

```python
from thinkbox.algorithms import quick_sort, two_sum

quick_sort([12, 87, 1, 66, 30])   # [1, 12, 30, 66, 87]
two_sum([2, 7, 11, 15], 9)        # [0, 1]
```

### Design patterns

- `thinkbox.interpreter` – `UserFilter("age > 25").filter(users)` keeps the
  `User`s whose age matches the rule (`>`, `>=`, `<`, `<=`, anything else
  meaning equality); a malformed rule raises `RuleError`.
- `thinkbox.options` – `Attrs` is a list of option callables; `apply(obj)`
  calls each on `obj` and returns it.
- `thinkbox.animals` – a simple factory: `create_animal(AnimalType.FISH)` or
  `create_animal(AnimalType.BIRD)` returns a constructor for a `Fish` or a
  `Bird`, configured with `with_id`, `with_name` and `with_color` (birds only).
- `thinkbox.book` – a builder: `Book.builder(101).set_price(99.0).build()`;
  a price that is not positive is left at zero.
- `thinkbox.decorators` – `consume(func)` wraps a function and prints how
  long each call took; `sum_range(a, b)` adds up the integers from `a` to `b`.
- `thinkbox.proxy` – `UserProxy` logs before delegating to `UserService`;
  `login_with(log_to_mongo)` or `login_with(log_to_mysql)` wraps its login.

### Concurrency

- `thinkbox.merge` – `cross_merge` and `cross_merge_threaded` interleave a
  list of names with a list of values, the latter using two threads that
  take turns.
- `thinkbox.summing` – `total(low, high)` and
  `parallel_total(low, high, workers)`.
- `thinkbox.producer` – `ProducerConsumer().run()` returns the five values
  passed from a producer thread to the consumer; `read_lines(path, workers,
  delay)` lets several threads take lines of one file in turn and returns
  `(worker, line)` pairs.
- `thinkbox.timing` – `TakeUpTimer().take_up(durations)` runs sleeping jobs
  on threads and returns the wall time and the summed job time.
- `thinkbox.crawler` – `Crawler(url_pattern).get(pages, output_dir)` fetches
  pages `1..pages` concurrently and saves each as `<page>.html`.

### Data and responses

- `thinkbox.database` – `Database(path=":memory:")` wraps an SQLite
  connection: `query`, `execute`, a nestable `transaction()` context manager
  and `create_tables()` for the `users` and `logs` tables. `SqlMapper` holds
  a statement and its arguments; `SqlMappers.exec(database, func)` runs
  `func` in one transaction.
- `thinkbox.responses` – `JSONResult` (`code`, `message`, `data`) built with
  `make_result(with_code(...), with_message(...), with_data(...))`; `ok`,
  `error` and `ok_text` pair a body with a status; `handle(api)` turns a
  function returning `(code, message, data)` into a JSON response.
- `thinkbox.result` – `result(data, error)` gives an `ErrorResult` with
  `unwrap()`, `unwrap_or(default)` and `unwrap_fun(func)`; `unwrap()` raises
  `ResultError`, or a `ValidationError` carrying a registered tip.
- `thinkbox.validation` – `check_rules(value, "required,min=2,max=10")`,
  `register_validation(tag, func, tip)`, `validate(tag, value)`; a
  `UserName` validation (2 to 10 characters) is registered on import.
- `thinkbox.helpers` – `md5_encrypt`, `get_prefix` and `get_suffix`.

### Uploads

- `thinkbox.chunk_upload` – `save_blocks` splits a stream into five blocks
  named `<prefix>_<n><suffix>`; `read_blocks` yields them back.
  `create_upload_app(storage_dir)` builds a Flask app with `POST /upload`
  (form field `file`) and `GET /file?name=...`, which streams the blocks.
- `thinkbox.uploader` – `SingleUpload(directory).upload(path)` copies a file
  under a `YYYYmmddHHMMSS` name; `uploading(path)` does the same while
  printing its progress.

### Redis

- `thinkbox.redis_lock` – `Locker(key, expire=30.0, client=None)` takes a
  lock with `lock()` or as a context manager and renews its expiry in the
  background until `unlock()`; failures raise `LockError`. Without a client
  it uses `redis_client()`, a shared client for `127.0.0.1:6379`.
- `thinkbox.signin` – `SignInCalendar(client)` keeps one bit per day:
  `sign_in`, `get_sign`, `sign_of_month(user_id, year, days, offset)` and
  `cumulative_days(user_id, year, day_of_year)`.

## Commands

```
thinkbox-permissions                 # show how permission flags combine and are removed
thinkbox-upload [FILE] [--directory DIR]
                                     # copy a file under a timestamped name, showing progress
thinkbox-signin [--host H] [--port P] [--user N] [--year Y]
                                     # print a user's sign-ins for a month and a running total
```

`thinkbox-signin` expects a Redis server, by default on `localhost:6379`.

## What it does not do

- There is no user-management web API and no command that starts one: the
  package provides the SQLite tables, the response helpers and validation,
  but no routes or data-access layer for listing, creating or updating users.
- The only web application is the chunked-upload app from
  `create_upload_app`; it is built, not served, by the package.
- `Locker` is a library class only; there is no server command guarded by it.