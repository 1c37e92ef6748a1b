# sqla.py: Resourceful mixin for SQLAlchemy declarative models
#
# class User(Base, SAResourceful):
#     __tablename__ = "users"
#     id = Column(Integer, primary_key=True)
#     name = Column(String)
#     posts = relationship("Post", back_populates="author")
#
# - the json:api "type" is the table name
# - the json:api "id" is derived from the primary keys (composite keys are joined with the PK_DELIMITER)
# - attributes are the mapped columns, except primary and foreign keys
# - MANYTOONE and uselist=False relationships are to-one, the others to-many
#
from typing import Any, Dict, List, Optional
from sqlalchemy import inspect as sqla_inspect
from sqlalchemy.orm.interfaces import MANYTOONE
from .config import get_config
from .jsonapi_objects import Identifier
from .resourceful import RelatedData, Resourceful


class SAResourceful(Resourceful):
    """
    This SQLAlchemy mixin implements the Resourceful interface for SQLAlchemy persistent objects

    The object attributes should not match column names, this is why the helper methods have the `_s_` prefix
    """

    exclude_attrs = []  # list of attribute names that should not be serialized
    exclude_rels = []  # list of relationship names that should not be serialized
    _s_pk_delimiter = None  # overrides the PK_DELIMITER config

    def kind(self) -> str:
        """
        :return: the jsonapi "type", i.e. the tablename if this is a db model, the classname otherwise
        """
        return getattr(self, "__tablename__", self.__class__.__name__)

    @property
    def jsonapi_id(self) -> Optional[str]:
        """
        :return: json:api id, None if the primary keys haven't been assigned yet
        """
        mapper = sqla_inspect(self.__class__)
        values = [getattr(self, mapper.get_property_by_column(column).key) for column in mapper.primary_key]
        if any(value is None for value in values):
            return None
        if len(values) == 1:
            return str(values[0])
        delimiter = self._s_pk_delimiter or get_config("PK_DELIMITER")
        return delimiter.join(str(value) for value in values)

    def identifier(self) -> Identifier:
        jsonapi_id = self.jsonapi_id
        if jsonapi_id is None:
            return Identifier.new(self.kind())
        return Identifier.existing(self.kind(), jsonapi_id)

    @classmethod
    def _s_jsonapi_attrs(cls) -> List[str]:
        """
        :return: names of the attributes exposed by the api
        jsonapi schema prohibits the use of the fields 'id' and 'type' in the attributes
        (http://jsonapi.org/format/#document-resource-object-fields), they're left out with the other keys
        """
        result = []
        for column_attr in sqla_inspect(cls).column_attrs:
            column = column_attr.columns[0]
            attr_name = column_attr.key
            if getattr(column, "primary_key", False) or getattr(column, "foreign_keys", None):
                continue
            if attr_name.startswith("_") or attr_name in cls.exclude_attrs or attr_name in ("id", "type"):
                continue
            result.append(attr_name)
        return result

    def attributes(self, context) -> Dict[str, Any]:
        attributes = {attr_name: getattr(self, attr_name) for attr_name in self._s_jsonapi_attrs()}
        return context.filter_attributes(self.kind(), attributes)

    def relationships(self, context) -> Dict[str, RelatedData]:
        result = {}
        for relationship in sqla_inspect(self.__class__).relationships:
            rel_name = relationship.key
            if rel_name in self.exclude_rels:
                continue
            related = getattr(self, rel_name)
            if relationship.direction == MANYTOONE or not relationship.uselist:
                rel_name, related_data = context.link_one(rel_name, related)
            else:
                # lazy="dynamic" relationships return a query, other collections are iterated as is
                rel_name, related_data = context.link_many(rel_name, list(related) if related is not None else [])
            result[rel_name] = related_data
        return result
