"""The fixed set of Gumloop tools exposed over MCP."""

from . import arguments as args
from .registry import ToolRegistry
from .results import file_download_result, json_result, run_archive_uri, run_file_uri
from .schema import OneOf

USER_OR_PROJECT = OneOf("user_id", "project_id")


def build_default_registry() -> ToolRegistry:
    """Create a registry holding every Gumloop tool."""
    registry = ToolRegistry()

    registry.register_endpoint(
        name="startAutomation",
        description="Initiates a new flow run for a specific saved automation",
        args_model=args.StartAutomationArgs,
        method="POST",
        path="/start_pipeline",
        result_mapper=json_result,
    )
    registry.register_endpoint(
        name="retrieveRunDetails",
        description="Retrieves details about a specific flow run",
        args_model=args.RetrieveRunDetailsArgs,
        method="GET",
        path="/get_pl_run",
        result_mapper=json_result,
        constraints=[USER_OR_PROJECT],
    )
    registry.register_endpoint(
        name="listSavedFlows",
        description="Retrieves a list of all saved flows for a user or project",
        args_model=args.ListSavedFlowsArgs,
        method="GET",
        path="/list_saved_items",
        result_mapper=json_result,
        constraints=[USER_OR_PROJECT],
    )
    registry.register_endpoint(
        name="listWorkbooks",
        description="Retrieves a list of all workbooks and their associated saved flows for a user or project",
        args_model=args.ListWorkbooksArgs,
        method="GET",
        path="/list_workbooks",
        result_mapper=json_result,
        constraints=[USER_OR_PROJECT],
    )
    registry.register_endpoint(
        name="retrieveInputSchema",
        description="Retrieves the input schema for a specific saved flow",
        args_model=args.RetrieveInputSchemaArgs,
        method="GET",
        path="/get_inputs",
        result_mapper=json_result,
        constraints=[USER_OR_PROJECT],
    )
    registry.register_endpoint(
        name="uploadFile",
        description="Uploads a single file to the Gumloop platform",
        args_model=args.UploadFileArgs,
        method="POST",
        path="/upload_file",
        result_mapper=json_result,
        constraints=[USER_OR_PROJECT],
    )
    registry.register_endpoint(
        name="uploadMultipleFiles",
        description="Uploads multiple files to the Gumloop platform in a single request",
        args_model=args.UploadMultipleFilesArgs,
        method="POST",
        path="/upload_files",
        result_mapper=json_result,
        constraints=[USER_OR_PROJECT],
    )
    registry.register_endpoint(
        name="downloadFile",
        description="Downloads a specific file from the Gumloop platform",
        args_model=args.DownloadFileArgs,
        method="POST",
        path="/download_file",
        result_mapper=file_download_result(run_file_uri, lambda a: f"File '{a['file_name']}'"),
    )
    registry.register_endpoint(
        name="downloadMultipleFiles",
        description="Downloads multiple files from the Gumloop platform as a zip archive",
        args_model=args.DownloadMultipleFilesArgs,
        method="POST",
        path="/download_files",
        result_mapper=file_download_result(run_archive_uri, lambda a: f"{len(a['file_names'])} file(s) as a zip archive"),
        constraints=[USER_OR_PROJECT],
    )

    return registry
