"""Argument models for every Gumloop tool.

Field descriptions end up verbatim in the advertised input schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolArguments(BaseModel):
    """Base for tool argument models. Unknown keys are dropped, never forwarded."""

    model_config = ConfigDict(extra="ignore")


class PipelineInput(ToolArguments):
    input_name: str = Field(description="The 'input_name' parameter from your Input node")
    value: str = Field(description="The value to be passed in to the Input node")


class FileUpload(ToolArguments):
    file_name: str = Field(description="The name of the file to be uploaded")
    file_content: str = Field(description="Base64 encoded content of the file")


class StartAutomationArgs(ToolArguments):
    user_id: str = Field(description="The ID for the user initiating the flow")
    saved_item_id: str = Field(description="The ID for the saved flow")
    project_id: Optional[str] = Field(default=None, description="The ID of the project within which the flow is executed")
    pipeline_inputs: Optional[List[PipelineInput]] = Field(
        default=None, description="A list of inputs for the flow, containing key-value pairs"
    )


class RetrieveRunDetailsArgs(ToolArguments):
    run_id: str = Field(description="ID of the flow run to retrieve")
    user_id: Optional[str] = Field(
        default=None, description="The ID for the user initiating the flow. Required if project_id is not provided"
    )
    project_id: Optional[str] = Field(
        default=None,
        description="The ID of the project within which the flow is executed. Required if user_id is not provided",
    )


class ListSavedFlowsArgs(ToolArguments):
    user_id: Optional[str] = Field(
        default=None, description="The user ID for which to list items. Required if project_id is not provided"
    )
    project_id: Optional[str] = Field(
        default=None, description="The project ID for which to list items. Required if user_id is not provided"
    )


class ListWorkbooksArgs(ToolArguments):
    user_id: Optional[str] = Field(
        default=None, description="The user ID for which to list workbooks. Required if project_id is not provided"
    )
    project_id: Optional[str] = Field(
        default=None, description="The project ID for which to list workbooks. Required if user_id is not provided"
    )


class RetrieveInputSchemaArgs(ToolArguments):
    saved_item_id: str = Field(description="The ID of the saved item for which to retrieve input schemas")
    user_id: Optional[str] = Field(
        default=None, description="User ID that created the flow. Required if project_id is not provided"
    )
    project_id: Optional[str] = Field(
        default=None, description="Project ID that the flow is under. Required if user_id is not provided"
    )


class UploadFileArgs(ToolArguments):
    file_name: str = Field(description="The name of the file to be uploaded")
    file_content: str = Field(description="Base64 encoded content of the file")
    user_id: Optional[str] = Field(
        default=None, description="The user ID associated with the file. Required if project_id is not provided"
    )
    project_id: Optional[str] = Field(
        default=None, description="The project ID associated with the file. Required if user_id is not provided"
    )


class UploadMultipleFilesArgs(ToolArguments):
    files: List[FileUpload] = Field(description="Array of file objects to upload")
    user_id: Optional[str] = Field(
        default=None, description="The user ID associated with the files. Required if project_id is not provided"
    )
    project_id: Optional[str] = Field(
        default=None, description="The project ID associated with the files. Required if user_id is not provided"
    )


class DownloadFileArgs(ToolArguments):
    file_name: str = Field(description="The name of the file to download")
    run_id: str = Field(description="The ID of the flow run associated with the file")
    saved_item_id: str = Field(description="The saved item ID associated with the file")
    user_id: Optional[str] = Field(default=None, description="The user ID associated with the flow run")
    project_id: Optional[str] = Field(default=None, description="The project ID associated with the flow run")


class DownloadMultipleFilesArgs(ToolArguments):
    file_names: List[str] = Field(description="An array of file names to download")
    run_id: str = Field(description="The ID of the flow run associated with the files")
    user_id: Optional[str] = Field(
        default=None, description="The user ID associated with the files. Required if project_id is not provided"
    )
    project_id: Optional[str] = Field(
        default=None, description="The project ID associated with the files. Required if user_id is not provided"
    )
    saved_item_id: Optional[str] = Field(default=None, description="The saved item ID associated with the files")
