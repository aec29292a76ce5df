"""Table-agnostic CRUD over a single DynamoDB table keyed by ``id``."""

import logging
from typing import Any, Generic, TypeVar

from botocore.exceptions import BotoCoreError, ClientError

from carriage.db.conditions import Condition
from carriage.errors import ConflictError, NotFoundError, StorageError, ValidationError
from carriage.models.base import CarriageModel

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=CarriageModel)

_KEY_NAMES = {"#pk": "id"}


def _is_conditional_failure(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


class TableRepository(Generic[M]):
    def __init__(self, model: type[M], table_name: str, dynamo_resource: Any) -> None:
        self.model = model
        self.table_name = table_name
        self._table = dynamo_resource.Table(table_name)

    @property
    def entity(self) -> str:
        return self.model.__name__

    def _storage_error(self, operation: str, error: Exception) -> StorageError:
        logger.exception("%s on %s failed", operation, self.table_name)
        return StorageError(f"{operation} on {self.table_name} failed: {error}")

    def get_by_id(self, record_id: str) -> M:
        try:
            response = self._table.get_item(Key={"id": record_id})
        except (ClientError, BotoCoreError) as e:
            raise self._storage_error("GetItem", e) from e

        item = response.get("Item")
        if item is None:
            raise NotFoundError(f"{self.entity} not found")
        return self.model.model_validate(item)

    def get_many(self, record_ids: list[str]) -> list[M]:
        """Fetch records in the given order, skipping ids that no longer exist."""
        records = []
        for record_id in record_ids:
            try:
                records.append(self.get_by_id(record_id))
            except NotFoundError:
                logger.info("Skipping missing %s %s", self.entity, record_id)
        return records

    def get_all(self) -> list[M]:
        return self.scan(Condition())

    def scan(self, condition: Condition) -> list[M]:
        scan_kwargs: dict[str, Any] = {}
        filter_expression = condition.build()
        if filter_expression is not None:
            scan_kwargs["FilterExpression"] = filter_expression

        items: list[dict[str, Any]] = []
        last_key = None
        while True:
            if last_key:
                scan_kwargs["ExclusiveStartKey"] = last_key
            try:
                response = self._table.scan(**scan_kwargs)
            except (ClientError, BotoCoreError) as e:
                raise self._storage_error("Scan", e) from e

            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break

        return [self.model.model_validate(item) for item in items]

    def create(self, record: M) -> M:
        item = record.to_item()
        try:
            self._table.put_item(
                Item=item,
                ConditionExpression="attribute_not_exists(#pk)",
                ExpressionAttributeNames=_KEY_NAMES,
            )
        except ClientError as e:
            if _is_conditional_failure(e):
                raise ConflictError(f"{self.entity} {item['id']} already exists") from e
            raise self._storage_error("PutItem", e) from e
        except BotoCoreError as e:
            raise self._storage_error("PutItem", e) from e

        logger.info("Created %s %s", self.entity, item["id"])
        return record

    def update(self, record_id: str, patch: dict[str, Any]) -> M:
        """Overwrite only the attributes in ``patch``; ``None`` removes one."""
        patch = {k: v for k, v in patch.items() if k != "id"}
        if not patch:
            raise ValidationError("No fields to update")

        names = dict(_KEY_NAMES)
        values: dict[str, Any] = {}
        set_clauses: list[str] = []
        remove_clauses: list[str] = []
        for i, (attribute, value) in enumerate(patch.items()):
            names[f"#a{i}"] = attribute
            if value is None:
                remove_clauses.append(f"#a{i}")
            else:
                values[f":a{i}"] = value
                set_clauses.append(f"#a{i} = :a{i}")

        expression = []
        if set_clauses:
            expression.append("SET " + ", ".join(set_clauses))
        if remove_clauses:
            expression.append("REMOVE " + ", ".join(remove_clauses))

        update_kwargs: dict[str, Any] = {
            "Key": {"id": record_id},
            "UpdateExpression": " ".join(expression),
            "ConditionExpression": "attribute_exists(#pk)",
            "ExpressionAttributeNames": names,
            "ReturnValues": "ALL_NEW",
        }
        if values:
            update_kwargs["ExpressionAttributeValues"] = values

        try:
            response = self._table.update_item(**update_kwargs)
        except ClientError as e:
            if _is_conditional_failure(e):
                raise NotFoundError(f"{self.entity} not found") from e
            raise self._storage_error("UpdateItem", e) from e
        except BotoCoreError as e:
            raise self._storage_error("UpdateItem", e) from e

        logger.info("Updated %s %s: %s", self.entity, record_id, sorted(patch))
        return self.model.model_validate(response["Attributes"])

    def delete_by_id(self, record_id: str) -> dict[str, str]:
        try:
            self._table.delete_item(
                Key={"id": record_id},
                ConditionExpression="attribute_exists(#pk)",
                ExpressionAttributeNames=_KEY_NAMES,
            )
        except ClientError as e:
            if _is_conditional_failure(e):
                raise NotFoundError(f"{self.entity} not found") from e
            raise self._storage_error("DeleteItem", e) from e
        except BotoCoreError as e:
            raise self._storage_error("DeleteItem", e) from e

        logger.info("Deleted %s %s", self.entity, record_id)
        return {"id": record_id}
