import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "rail_request.conf.test_settings")
django.setup()

from rail_request import RequestInput  # noqa: E402
from rail_request.contributions import with_graphql_context, with_trace_id  # noqa: E402
from rail_request.engine import execute_request_input  # noqa: E402
from rail_request.testing import build_ping_schema  # noqa: E402


def main():
    request_input = RequestInput.from_dict(
        {"query": "query Ping { ping traceId }", "operationName": "Ping"},
        request_id="req-1",
        locale="en_US",
    )

    # Independent collaborators register their contributions
    request_input.configure_execution_input(with_trace_id())
    request_input.configure_execution_input(with_graphql_context(tenant="acme"))
    request_input.freeze()

    print(request_input)
    print(request_input.to_dict())

    result = execute_request_input(build_ping_schema(), request_input, use_request_id=True)
    print(result.data)


if __name__ == "__main__":
    main()
