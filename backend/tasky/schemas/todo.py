from pydantic import BaseModel, ConfigDict, Field


class TodoCreated(BaseModel):
    success: str = "Todo created successfully"
    id: str


class TodoUpdated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: str = "Todo updated successfully"
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")


class TodoDeleted(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: str = "Todo deleted successfully"
    deleted_count: int = Field(alias="deletedCount")


class TodosCleared(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: str = "All todos deleted"
    deleted_count: int = Field(alias="deletedCount")
