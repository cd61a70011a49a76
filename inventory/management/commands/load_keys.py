"""
Django management command to bulk-load keys into a tier.

Reads a newline-delimited file (or stdin with "-"), one key per line.
"""

import asyncio
import logging
import sys

from django.core.management.base import BaseCommand, CommandError

from core.domain.exceptions import InvalidTierError
from inventory.application.commands.add_keys import AddKeysCommand
from inventory.application.handlers.add_keys_handler import AddKeysHandler
from inventory.domain.key_pool import normalize_candidates
from inventory.infrastructure.repositories.django_deduplicator import DjangoDeduplicator
from inventory.infrastructure.repositories.django_pool_registry import DjangoPoolRegistry

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to load keys from a file."""

    help = "Bulk-load newline-delimited keys into a tier"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("tier", type=str, help='Target tier, e.g. "7 days"')
        parser.add_argument("path", type=str, help='Key file, or "-" for stdin')
        parser.add_argument(
            "--batch-size",
            type=int,
            default=1000,
            help="Keys submitted per bulk add (default: 1000)",
        )

    def _read_lines(self, path):
        if path == "-":
            return sys.stdin.read().splitlines()
        try:
            with open(path, encoding="utf-8") as handle:
                return handle.read().splitlines()
        except OSError as e:
            raise CommandError(f"Cannot read {path}: {e}") from e

    def handle(self, *args, **options):
        """Execute the command."""
        batch_size = options["batch_size"]
        if batch_size < 1:
            raise CommandError("--batch-size must be positive")

        # Reject the whole file before the first batch commits
        try:
            lines = normalize_candidates(self._read_lines(options["path"]))
        except ValueError as e:
            raise CommandError(f"{options['path']}: {e}") from e
        handler = AddKeysHandler(pool_registry=DjangoPoolRegistry(DjangoDeduplicator()))

        async def load():
            added = duplicates = 0
            for start in range(0, len(lines), batch_size):
                result = await handler.handle(
                    AddKeysCommand(tier=options["tier"], keys=lines[start:start + batch_size])
                )
                added += result.added
                duplicates += result.duplicates
            return added, duplicates

        try:
            added, duplicates = asyncio.run(load())
        except InvalidTierError as e:
            raise CommandError(e.message) from e

        logger.info(
            "Key file loaded",
            extra={"tier": options["tier"], "added": added, "duplicates": duplicates},
        )
        # pylint: disable=no-member
        self.stdout.write(
            self.style.SUCCESS(
                f"Added {added} key(s) to {options['tier']} ({duplicates} duplicate(s) skipped)"
            )
        )
