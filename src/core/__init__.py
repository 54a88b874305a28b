"""
Core value types, primitives, and invariants of the VM integer cell.

This module contains the foundational building blocks that are independent
of the opcode dispatcher and the VM call stack.
"""
