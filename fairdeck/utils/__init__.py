from fairdeck.utils.groups import (
    hash_to_generator,
    sum_points,
    sum_bn_array,
    ensure_bn,
    scalar_byte_length,
)
