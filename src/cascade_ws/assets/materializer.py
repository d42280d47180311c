"""Build typed assets from read replies."""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from ..client.errors import MaterializationError
from ..client.identifiers import Identifier
from .base import Asset
from .registry import concrete_shape_for
from .types import AssetType, property_field_for, to_asset_type

if TYPE_CHECKING:
    from ..client.service import AssetOperationService

logger = logging.getLogger(__name__)


def materialize(
    asset_type: Union[AssetType, str],
    identifier: Identifier,
    envelope: Optional[Dict[str, Any]],
    service: "AssetOperationService",
) -> Asset:
    """Dispatch an asset envelope to its concrete shape.

    Args:
        asset_type: Type tag the asset was read as
        identifier: Identifier the asset was read by
        envelope: The ``asset`` object of a read reply
        service: Service handed to the asset for later operations

    Returns:
        The typed asset

    Raises:
        NoSuchTypeError: If the type has no shape
        MaterializationError: If the envelope lacks the type's field or the
            shape cannot be built from it
    """
    resolved = to_asset_type(asset_type)
    shape = concrete_shape_for(resolved)
    property_name = property_field_for(resolved)

    bag = (envelope or {}).get(property_name)
    if bag is None:
        raise MaterializationError(
            resolved.value, f"reply has no '{property_name}' property"
        )

    try:
        asset = shape(service, identifier, bag)
    except MaterializationError:
        raise
    except Exception as e:
        raise MaterializationError(resolved.value, str(e)) from e

    logger.debug(f"Materialized {shape.__name__} {asset.id}")
    return asset
