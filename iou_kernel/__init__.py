"""
IOU Kernel

Pure domain layer for money-request previews:
- Transactions, reports and report actions as immutable value objects
- Receipt, smart-scan and settlement predicates
- Currency display formatting from minor units
- Typed exceptions and structured logging
"""

__version__ = "0.1.0"
