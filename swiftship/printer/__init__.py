"""Swift printer for the SwiftUI IR."""

from swiftship.printer.lib import (
    INDENT,
    SwiftPrinter,
    print_entry_file,
    print_expr,
    print_model_file,
    print_view_file,
    swift_string,
)

__all__ = [
    "INDENT",
    "SwiftPrinter",
    "swift_string",
    "print_view_file",
    "print_model_file",
    "print_entry_file",
    "print_expr",
]
