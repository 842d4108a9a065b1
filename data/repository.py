# data/repository.py
import contextlib
import os
from dataclasses import dataclass
from pathlib import Path

from models.cart import Cart, LineItem
from models.errors import CartStorageError, CorruptCartError, EmptyCartError, InvalidItemError

HEADER = "Name,Price,Quantity"


@dataclass(frozen=True)
class LoadResult:
    found: bool
    count: int = 0
    discount_used: bool = False


class CartRepository:
    def __init__(self, cart_path="cart.csv", status_path="discount_status.txt"):
        # the discount flag lives in its own small file next to the cart
        self.cart_path = Path(cart_path)
        self.status_path = Path(status_path)

    def _stage(self, path: Path, text: str) -> Path:
        tmp = path.with_name(path.name + ".tmp")
        with open(tmp, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        return tmp

    def save(self, cart: Cart, cart_path=None, status_path=None) -> Path:
        if not cart.items:
            raise EmptyCartError("Cannot save: the cart is empty.")

        path = Path(cart_path) if cart_path else self.cart_path
        status = Path(status_path) if status_path else self.status_path

        lines = [HEADER]
        for item in cart.items:
            # repr() of a float reads back as the same float
            lines.append(f"{item.name},{item.unit_price!r},{item.quantity}")

        # Both files are staged under temp names first. The status file is
        # moved into place before the cart file, and put back if the cart
        # move fails, so cart.csv never pairs with a flag from another save.
        previous_status = read_previous(status)
        status_moved = False
        try:
            cart_tmp = self._stage(path, "\n".join(lines) + "\n")
            status_tmp = self._stage(status, str(cart.discount_used))
            os.replace(status_tmp, status)
            status_moved = True
            os.replace(cart_tmp, path)
        except OSError as e:
            if status_moved:
                restore_status(status, previous_status)
            for target in (path, status):
                with contextlib.suppress(OSError):
                    target.with_name(target.name + ".tmp").unlink(missing_ok=True)
            raise CartStorageError(f"Error saving cart: {e}") from e
        return path

    def load(self, cart: Cart, cart_path=None, status_path=None) -> LoadResult:
        # Always start from an empty cart, loaded data replaces it.
        cart.clear()

        path = Path(cart_path) if cart_path else self.cart_path
        status = Path(status_path) if status_path else self.status_path

        if not path.exists():
            return LoadResult(found=False)

        try:
            with open(path, "r", encoding="utf-8") as f:
                items = parse_rows(f)
            discount_used = read_status(status)
        except UnicodeDecodeError as e:
            raise CorruptCartError(f"Error loading cart. Data may be corrupt: {e}") from e
        except OSError as e:
            raise CartStorageError(f"Error loading cart: {e}") from e

        # nothing reaches the cart until every row parsed
        cart.replace(items, discount_used)
        return LoadResult(found=True, count=len(items), discount_used=discount_used)


def parse_rows(lines) -> list[LineItem]:
    # First line is the header. Lines that do not split into exactly
    # three fields are skipped; a bad number is corrupt data.
    items: list[LineItem] = []
    for lineno, raw in enumerate(lines, start=1):
        if lineno == 1:
            continue
        parts = raw.rstrip("\r\n").split(",")
        if len(parts) != 3:
            continue

        name, price_text, qty_text = parts
        try:
            price = float(price_text)
            qty = int(qty_text)
        except ValueError as e:
            raise CorruptCartError(
                f"Error loading cart. Data may be corrupt (line {lineno}): {e}", line=lineno
            ) from e

        try:
            items.append(LineItem(name, price, qty))
        except InvalidItemError as e:
            raise CorruptCartError(
                f"Error loading cart. Data may be corrupt (line {lineno}): {e}", line=lineno
            ) from e
    return items


def read_status(path: Path) -> bool:
    # Missing file -> discount not used.
    if not path.exists():
        return False
    with open(path, "r", encoding="utf-8") as f:
        text = f.read().strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise CorruptCartError(f"Error loading cart. Unreadable discount status: {text!r}")


def read_previous(path: Path):
    # Bytes of an existing status file, None when there is nothing to restore.
    try:
        return path.read_bytes()
    except OSError:
        return None


def restore_status(path: Path, data) -> None:
    with contextlib.suppress(OSError):
        if data is None:
            path.unlink(missing_ok=True)
        else:
            path.write_bytes(data)
