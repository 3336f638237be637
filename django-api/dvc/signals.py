"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from dvc.cache import contracts_cache_key
from dvc.models import Contract


@receiver([post_save, post_delete], sender=Contract)
def invalidate_contracts_cache(sender, instance, **kwargs):
    """Invalidate the owner's contract list once the save or delete commits."""
    key = contracts_cache_key(instance.owner_id)
    transaction.on_commit(lambda: cache.delete(key))
