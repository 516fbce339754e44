# funcurry

Small helpers for working with Python callables in a functional style:
currying and uncurrying, binding arguments, dropping values, reversing
parameters, lazy (thunk) arguments, adapting call shapes, describing
signatures, and a handful of iterator tools. It has no dependencies
beyond the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## Currying

```python
from funcurry.curry import curry, head, uncurry

def multiply(a, b):
    return a * b

times_two = curry(multiply)(2)      # arity read from the signature
print(times_two(5))                 # 10

join3 = curry(lambda a, b, c: a + b + c, 3)
print(join3("a")("b")("c"))         # "abc"

add = uncurry(lambda a: lambda b: a + b, 2)
print(add(3, 4))                    # 7

print(head(lambda a, b, c: a + b + c)("a")("b", "c"))  # "abc"
```

`curry(fn, arity, variadic)` reads the number of stages from `fn`'s
positional parameters when `arity` is omitted; with `variadic` the last
stage takes any number of arguments and passes them on as `*args`.
`uncurry(fn, arity, variadic)` collapses `arity` stages into one call and
leaves further stages curried. An arity below 1 raises `ValueError`, a
wrong number of arguments to an uncurried function raises `TypeError`.

## Binding and dropping

```python
from funcurry.bind import bind, bind_first, bind_last
from funcurry.drop import drop_first, drop_last

print(bind(lambda a, b: a + b, "a", "b")())        # "ab"
print(bind_first(lambda a, b: a - b, 10)(3))       # 7
print(bind_last(lambda a, b: a + b, "a")("b"))     # "ba"

print(drop_last(1, 2, 3))   # (1, 2)
print(drop_first(1, 2))     # 2
```

`drop_first` and `drop_last` return a single remaining value as is,
several as a tuple and none as `None`; called with no values they raise
`TypeError`.

## Identities and thunks

`funcurry.returns` has `identity`, `identity2`, `identity_s` (arguments
as a list) and the matching thunk makers `thunk`, `thunk2` and `thunk_s`,
which return a callable producing the given values.

## Lazy arguments

```python
from funcurry.lazy import lazy
from funcurry.returns import thunk, thunk_s

greet = lazy(lambda a, b: f"{a} {b}")
print(greet(thunk("first"), thunk("second")))     # "first second"

joined = lazy(lambda *parts: ", ".join(parts), True)
print(joined(thunk_s("abc", "def")))              # "abc, def"
```

No thunk is called until the returned function is, and they are called in
order. With `variadic` the last thunk's sequence is spread into `*args`.

## Reversing parameters

`funcurry.reverse.reverse(fn)` returns `fn` taking its arguments in
reverse order: `reverse(fn)(c, b, a)` calls `fn(a, b, c)`.

## Composition and predicates

```python
from funcurry.bind import bind_first
from funcurry.predicates import eq, not_
from funcurry.wrap import wrap

not_banana = wrap(bind_first(eq, "banana"), not_)
print(not_banana("orange"))  # True
```

`wrap(start, *processors)` runs `start`, passes its result to each
processor and returns the result of the last one (`None` if there are
none).

## Signatures and adapting

`funcurry.signature.signature(fn)` returns a frozen `Signature` with
`params` (positional parameter types, plus the `*args` element type when
`variadic` is set; unannotated slots are `Any`), `returns` (one type per
returned value: a tuple annotation counts as several, `None` as none),
`arity`, `zero_args` and `zero_results` (the empty values of those
types, `None` where a type has none).

`funcurry.adapt.adapt(fn, arity)` makes a function with fewer parameters
callable with exactly `arity` arguments; it receives, in order, the
arguments that fit its annotated parameter types and the rest are
ignored. `adapt_like(target, fn)` adapts `fn` to the shape of `target`:
when `target` declares one result type a `None` result becomes that
type's empty value and a result of another type raises `TypeError`; when
`target` declares no result the result is dropped.

```python
from funcurry.adapt import adapt, adapt_like

print(adapt(lambda: 100, 2)(2, 3))                  # 100

def target(a: int, b: str) -> str: ...
print(adapt_like(target, lambda b: b)(2, "abc"))    # 2 (first fitting argument)
print(adapt_like(target, lambda b: None)(2, "abc")) # ""
```

## Sequences

`funcurry.seq` holds iterator utilities.

- `funcurry.seq.generate`: `generate`, `seq_range`, `generator`, `index`,
  `zip_fill` (pads the shorter side with `None`) and `zip_short`.
- `funcurry.seq.take`: `take`, `tail`, `filter_seq`, `map_seq`, `map15`,
  `map2`, `until`, `last` and `accumulate` (folds with
  `acc(value, accumulated)` starting from `None`).
- `funcurry.seq.channel`: `Channel`, an unbuffered channel between threads
  with `send`, `receive` and `close`, plus `chan_as_seq` and
  `seq_as_chan`, which feeds an iterable into a new channel from a
  daemon thread and closes it at the end.

```python
from funcurry.seq.generate import generate, index
from funcurry.seq.take import take

print(list(take(5, generate(index(5)))))  # [5, 6, 7, 8, 9]
```

## Running the tests

```
pip install .[test]
pytest
```