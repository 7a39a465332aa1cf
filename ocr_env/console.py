"""Prefixed console output used by every provisioning step."""

from __future__ import annotations


def info(msg: str) -> None:
    print(f"[INFO] {msg}")


def warn(msg: str) -> None:
    print(f"[WARN] {msg}")


def err(msg: str) -> None:
    print(f"[ERROR] {msg}")


def ok(msg: str) -> None:
    print(f"[OK] {msg}")


def banner(title: str) -> None:
    print()
    print("===============================")
    print(f" {title}")
    print("===============================")
    print()
