"""Nightbase auto clock-out service.

Feature modules (stores, attendance, clockout) keep the same split: plain
dataclass models, Protocol repositories with MySQL implementations, and
services that depend only on the repository interfaces. A thin Flask
controller exposes the cron trigger.
"""
