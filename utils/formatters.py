# utils/formatters.py
from models.receipt import CartReport, DiscountPreview, Receipt


def money(v: float) -> str:
    return f"${v:.2f}"


def banner(cafe_name: str, tax_rate: float) -> list[str]:
    rule = "=" * 40
    return [rule, f"{cafe_name} - Tax Rate: {tax_rate:.3f}", rule]


def cart_lines(report: CartReport) -> list[str]:
    lines = ["", "--- Current Cart ---"]
    if not report.items:
        lines.append("Your cart is empty.")
        return lines

    lines.append(f"{'No.':<4} {'Item':<20} {'Price':>10} {'Qty':>5} {'Total':>10}")
    lines.append("-" * 52)
    for i, item in enumerate(report.items, start=1):
        lines.append(
            f"{i:<4} {item.name:<20} ${item.unit_price:>9.2f} {item.quantity:>5} ${item.line_total:>9.2f}"
        )
    lines.append("-" * 52)
    lines.append(f"{'Subtotal:':<40} ${report.subtotal:>10.2f}")
    lines.append(f"{'Tax:':<40} ${report.tax:>10.2f}")
    lines.append(f"{'Estimated Total:':<40} ${report.estimated_total:>10.2f}")

    if report.average_line_total is not None:
        top = report.most_expensive
        lines.append("")
        lines.append(f"Average Line Total: {money(report.average_line_total)}")
        lines.append(f"Most Expensive Item: {top.name} @ {money(top.unit_price)}")
    return lines


def preview_lines(preview: DiscountPreview) -> list[str]:
    return [
        "",
        "--- Discount Preview ---",
        f"You saved:       {money(preview.discount)}",
        f"New Subtotal:    {money(preview.subtotal)}",
        f"Estimated Tax:   {money(preview.tax)}",
        f"Estimated Total: {money(preview.total)}",
    ]


def receipt_lines(receipt: Receipt, cafe_name: str) -> list[str]:
    lines = [
        "",
        "--- RECEIPT ---",
    ]
    for item in receipt.items:
        lines.append(f"{item.name} x {item.quantity} @ {money(item.unit_price)}")
    lines.append(f"Subtotal:        {money(receipt.subtotal)}")
    if receipt.has_discount:
        lines.append(f"Discount:       -{money(receipt.discount)}")
    lines.append(f"Tax:             {money(receipt.tax)}")
    lines.append("-------------------")
    lines.append(f"TOTAL:           {money(receipt.total)}")
    lines.append("")
    lines.append(f"Thank you for visiting {cafe_name}!")
    return lines
