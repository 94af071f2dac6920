# patternbook

A collection of small, self-contained demonstrations of the classic software
design patterns. Each pattern lives in its own module. You can import it and
explore it from Python. Each module also comes with a command that runs a short
scenario and prints what happens step by step.

The package has no runtime dependencies and works on Python 3.10 and later.

## Installation

```
pip install patternbook
```

To run the test suite as well:

```
pip install "patternbook[test]"
pytest
```

## The patterns

| Module                                | Pattern                  | Scenario                                              |
|---------------------------------------|--------------------------|-------------------------------------------------------|
| `patternbook.abstract_factory`        | Abstract factory         | Adidas and Nike factories making shoes and shirts     |
| `patternbook.factory`                 | Factory                  | Building an AK47 or a musket by name                  |
| `patternbook.builder`                 | Builder                  | A director building a normal house and an igloo       |
| `patternbook.prototype`               | Prototype                | Cloning a tree of files and folders                   |
| `patternbook.singleton_lock`          | Singleton (locked check) | Many threads asking for one shared instance           |
| `patternbook.singleton_once`          | Singleton (run once)     | The same, with one-time initialisation                |
| `patternbook.adapter`                 | Adapter                  | Plugging a Lightning connector into a USB machine     |
| `patternbook.bridge`                  | Bridge                   | Mac and Windows computers with HP and Epson printers  |
| `patternbook.composite`               | Composite                | Searching files and nested folders                    |
| `patternbook.decorator`               | Decorator                | Pricing a pizza with stacked toppings                 |
| `patternbook.facade`                  | Facade                   | A wallet hiding account, code, ledger and notices     |
| `patternbook.flyweight`               | Flyweight                | Players sharing dress objects                         |
| `patternbook.proxy`                   | Proxy                    | A rate-limiting server in front of an application     |
| `patternbook.chain_of_responsibility` | Chain of responsibility  | A patient passing through hospital departments        |
| `patternbook.command`                 | Command                  | Buttons turning a TV on and off                       |
| `patternbook.iterator`                | Iterator                 | Walking a collection of users                         |
| `patternbook.mediator`                | Mediator                 | A station manager controlling a single platform       |
| `patternbook.memento`                 | Memento                  | Saving and restoring an originator's state            |
| `patternbook.observer`                | Observer                 | Customers told when an item is back in stock          |
| `patternbook.state`                   | State                    | A vending machine moving between states               |
| `patternbook.strategy`                | Strategy                 | A cache with swappable eviction algorithms            |
| `patternbook.template`                | Template method          | Sending a one-time password by SMS or e-mail          |
| `patternbook.visitor`                 | Visitor                  | Visiting squares, circles and rectangles              |

## Running the demonstrations

Each module has a command that plays its scenario and prints the trace:

```
patternbook-abstract-factory
patternbook-adapter
patternbook-bridge
patternbook-builder
patternbook-chain-of-responsibility
patternbook-command
patternbook-composite
patternbook-decorator
patternbook-facade
patternbook-factory
patternbook-flyweight
patternbook-iterator
patternbook-mediator
patternbook-memento
patternbook-observer
patternbook-prototype
patternbook-proxy
patternbook-state
patternbook-strategy
patternbook-template
patternbook-visitor
patternbook-singleton-lock
patternbook-singleton-once
```

The two singleton commands start 30 threads that all call `get_instance()`.
They then wait for a line on standard input before they exit.

Each command calls the `main()` function of the matching module, so you can
also run the same scenario from Python:

```python
from patternbook import decorator

decorator.main()
```

## Using the modules from Python

The classes are ordinary Python objects and can be combined freely.

Picking a factory by brand. An unknown brand raises `ValueError`:

```python
from patternbook.abstract_factory import get_sports_factory, describe

factory = get_sports_factory("nike")
print(describe(factory.make_shoe()))   # Logo: nike / Size: 14
print(describe(factory.make_shirt()))
```

Stacking decorators:

```python
from patternbook.decorator import VeggieMania, CheeseTopping, TomatoTopping

pizza = TomatoTopping(CheeseTopping(VeggieMania()))
print(pizza.price())   # 32
```

Putting a rate-limiting proxy in front of an application. `Nginx` allows two
requests per URL by default. After that it answers `(403, "Not Allowed")`:

```python
from patternbook.proxy import Nginx

server = Nginx()
print(server.handle_request("/app/status", "GET"))   # (200, 'Ok')
```

Driving a state machine. An action that the current state does not allow
raises `VendingMachineError`:

```python
from patternbook.state import VendingMachine, VendingMachineError

machine = VendingMachine(1, 10)
machine.request_item()
machine.insert_money(10)
machine.dispense_item()

try:
    machine.dispense_item()
except VendingMachineError as error:
    print(error)   # Item out of stock
```

The wallet facade has two methods, `WalletFacade.add_money_to_wallet` and
`WalletFacade.deduct_money_from_wallet`. Each raises `WalletError` when the
account name, the security code or the balance does not check out.

Iterating over users works with a plain `for` loop, because `UserCollection`
and `UserIterator` follow Python's iterator protocol:

```python
from patternbook.iterator import User, UserCollection

for user in UserCollection([User("a", 30), User("b", 20)]):
    print(user.name)
```

## What the examples do not do

These modules demonstrate structure. They are not working implementations of
the things they model:

- The eviction algorithms in `patternbook.strategy` only announce and count an
  eviction. They do not remove any key from the cache's storage.
- The visitors in `patternbook.visitor` record which shapes they visited. They
  do not compute areas or middle points.
- `patternbook.template` always issues the fixed one-time password `1234`.
  Nothing is really sent or cached.
- The printers, the TV, the notifications and the ledger only print messages.
  They do not talk to any device or service.