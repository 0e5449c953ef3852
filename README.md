# topicstream

Building blocks for describing topics on a publish/subscribe message stream:
topic names, the delivery mode of a topic, retention and discard policies,
topic errors, and a per-topic options record that can be adjusted with option
callables. Everything lives in the `topicstream.topic` module, which uses only
the standard library.

## Usage

```python
from datetime import timedelta

from topicstream.topic import (
    DiscardPolicy,
    Retention,
    Topic,
    TopicMode,
    TopicOptions,
)

orders = Topic("order.created.v1")
assert orders == "order.created.v1"   # a Topic is a str

options = TopicOptions()              # core mode, ephemeral retention, no limits


def durable(opts):
    opts.mode = TopicMode.JETSTREAM
    opts.retention = Retention.DURABLE


def keep_a_day(opts):
    opts.max_age = timedelta(hours=24)
    opts.discard_policy = DiscardPolicy.OLD


options.apply(durable, keep_a_day)    # applies in order, returns options
print(str(options.mode))              # "jetstream"
```

### Topic

`Topic` is a subclass of `str`. It compares, hashes and behaves exactly like
the string it wraps, so it can be used as a dictionary key or passed wherever a
string is expected. Its `repr` is `Topic('...')`. Creating a `Topic` does not
validate the name.

### Enumerations

All three are `IntEnum`s:

- `TopicMode`: `CORE` (0) and `JETSTREAM` (1); `str()` gives `"core"` and
  `"jetstream"`.
- `Retention`: `EPHEMERAL` (0) and `DURABLE` (1).
- `DiscardPolicy`: `OLD` (0) and `NEW` (1).

### TopicOptions

A dataclass with these fields and defaults:

| field              | default                 |
|--------------------|-------------------------|
| `mode`             | `TopicMode.CORE`        |
| `retention`        | `Retention.EPHEMERAL`   |
| `max_bytes`        | `0`                     |
| `max_msgs`         | `0`                     |
| `max_age`          | `timedelta()`           |
| `replicas`         | `0`                     |
| `discard_policy`   | `DiscardPolicy.OLD`     |
| `subject_override` | `""`                    |
| `codec`            | `None`                  |

`TopicOptions.apply(*options)` calls each option with the record, in order,
and returns the same record.

### Errors

All topic errors derive from `TopicError` (itself an `Exception`). Raised
without a message, each carries its default one:

- `InvalidTopicError`: "invalid topic name"
- `TopicExistsError`: "topic already exists"
- `UnknownTopicError`: "unknown topic"

## What this package does not do

It only describes topics. It does not connect to a message server, publish or
subscribe, keep a registry of topics, or validate topic names; nothing in the
package raises the topic errors itself. They are provided for code built on
top of it.