# ============================================================================
# BATCH PROGRESS CALCULATION FOR ROLLING UPDATES
# ============================================================================
# STATUS: Core - Pure calculation functions
# PURPOSE: Map a count of updating instances onto a batch index
# ============================================================================
"""
Batch Progress Calculation.

Answers "which batch is the update in" for a variable batch strategy.
The final listed batch size repeats indefinitely once the explicit sizes
are used up, so any instance count maps to a batch.

Exports:
    calculate_current_batch: Zero-indexed batch for a count of updating instances
"""

from typing import Sequence

from exceptions import ContractViolationError


def _check_batch_sizes(batch_sizes: Sequence[int]) -> None:
    """Reject batch size lists the calculation is undefined for."""
    if len(batch_sizes) == 0:
        raise ValueError("batch_sizes must contain at least one batch size")

    for index, size in enumerate(batch_sizes):
        # bool is an int subclass but never a meaningful batch size
        if isinstance(size, bool) or not isinstance(size, int):
            raise ContractViolationError(
                f"batch size at index {index} must be int, got {type(size).__name__}"
            )
        if size <= 0:
            raise ValueError(f"batch size at index {index} must be positive, got {size}")


def calculate_current_batch(updating_instances: int, batch_sizes: Sequence[int]) -> int:
    """
    Calculate the zero-indexed batch an update is in.

    Walks the batch sizes in order, consuming each batch from the count of
    updating instances. The first batch that consumes the remainder is the
    current batch. If instances remain after the last listed batch, extra
    batches of the last listed size are counted, plus one for a partial batch.

    Args:
        updating_instances: Number of instances currently being updated
        batch_sizes: Ordered batch sizes, non-empty and all positive

    Returns:
        Zero-indexed batch number

    Raises:
        ValueError: batch_sizes is empty or holds a size <= 0
        ContractViolationError: batch_sizes holds a non-int value

    Examples:
        calculate_current_batch(5, [5, 5, 5])   # 0
        calculate_current_batch(6, [5, 5, 5])   # 1
        calculate_current_batch(17, [5, 5, 5])  # 3 (overflow batch of 5)
    """
    _check_batch_sizes(batch_sizes)

    remaining = updating_instances
    for index, size in enumerate(batch_sizes):
        remaining -= size
        if remaining <= 0:
            return index

    # Overflow: the last listed size repeats
    last_size = batch_sizes[-1]
    full_batches, leftover = divmod(remaining, last_size)
    batch = len(batch_sizes) - 1 + full_batches
    if leftover != 0:
        batch += 1
    return batch
