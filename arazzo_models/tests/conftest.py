from __future__ import annotations

import json

import pytest

PET_STORE_YAML = """\
arazzo: 1.0.1
info:
  title: A pet purchasing workflow
  summary: This Arazzo Description showcases the workflow for how to purchase a pet through a sequence of API calls
  description: |
      This Arazzo Description walks you through the workflow and steps of `searching` for, `selecting`, and `purchasing` an available pet.
  version: 1.0.0
sourceDescriptions:
- name: petStoreDescription
  url: https://github.com/swagger-api/swagger-petstore/blob/master/src/main/resources/openapi.yaml
  type: openapi

workflows:
- workflowId: loginUserAndRetrievePet
  summary: Login User and then retrieve pets
  description: This workflow lays out the steps to login a user and then retrieve pets
  inputs:
      type: object
      properties:
          username:
              type: string
          password:
              type: string
  steps:
  - stepId: loginStep
    description: This step demonstrates the user login step
    operationId: loginUser
    parameters:
      # parameters to inject into the loginUser operation
      - name: username
        in: query
        value: $inputs.username
      - name: password
        in: query
        value: $inputs.password
    successCriteria:
      # assertions to determine step was successful
      - condition: $statusCode == 200
    outputs:
      tokenExpires: $response.header.X-Expires-After
      rateLimit: $response.header.X-Rate-Limit
      sessionToken: $response.body
  - stepId: getPetStep
    description: retrieve a pet by status from the GET pets endpoint
    operationPath: '{$sourceDescriptions.petstoreDescription.url}#/paths/~1pet~1findByStatus/get'
    parameters:
      - name: status
        in: query
        value: 'available'
      - name: Authorization
        in: header
        value: $steps.loginUser.outputs.sessionToken
    successCriteria:
      - condition: $statusCode == 200
    outputs:
      availablePets: $response.body
  outputs:
      available: $steps.getPetStep.outputs.availablePets
"""

PET_STORE = {
    "arazzo": "1.0.1",
    "info": {
        "title": "A pet purchasing workflow",
        "summary": "This Arazzo Description showcases the workflow for how to purchase a pet through a sequence of API calls",
        "description": "This Arazzo Description walks you through the workflow and steps of `searching` for, `selecting`, and `purchasing` an available pet.\n",
        "version": "1.0.0",
    },
    "sourceDescriptions": [
        {
            "name": "petStoreDescription",
            "url": "https://github.com/swagger-api/swagger-petstore/blob/master/src/main/resources/openapi.yaml",
            "type": "openapi",
        }
    ],
    "workflows": [
        {
            "workflowId": "loginUserAndRetrievePet",
            "summary": "Login User and then retrieve pets",
            "description": "This workflow lays out the steps to login a user and then retrieve pets",
            "inputs": {
                "type": "object",
                "properties": {
                    "username": {"type": "string"},
                    "password": {"type": "string"},
                },
            },
            "steps": [
                {
                    "stepId": "loginStep",
                    "description": "This step demonstrates the user login step",
                    "operationId": "loginUser",
                    "parameters": [
                        {"name": "username", "in": "query", "value": "$inputs.username"},
                        {"name": "password", "in": "query", "value": "$inputs.password"},
                    ],
                    "successCriteria": [{"condition": "$statusCode == 200"}],
                    "outputs": {
                        "tokenExpires": "$response.header.X-Expires-After",
                        "rateLimit": "$response.header.X-Rate-Limit",
                        "sessionToken": "$response.body",
                    },
                },
                {
                    "stepId": "getPetStep",
                    "description": "retrieve a pet by status from the GET pets endpoint",
                    "operationPath": "{$sourceDescriptions.petstoreDescription.url}#/paths/~1pet~1findByStatus/get",
                    "parameters": [
                        {"name": "status", "in": "query", "value": "available"},
                        {
                            "name": "Authorization",
                            "in": "header",
                            "value": "$steps.loginUser.outputs.sessionToken",
                        },
                    ],
                    "successCriteria": [{"condition": "$statusCode == 200"}],
                    "outputs": {"availablePets": "$response.body"},
                },
            ],
            "outputs": {"available": "$steps.getPetStep.outputs.availablePets"},
        }
    ],
}


@pytest.fixture
def minimal_document() -> dict:
    # Smallest description the loader accepts.
    return {
        "arazzo": "1.0.1",
        "info": {"title": "t", "version": "1.0.0"},
        "sourceDescriptions": [{"name": "s", "url": "http://x"}],
        "workflows": [{"workflowId": "w", "steps": [{"stepId": "s1"}]}],
    }


@pytest.fixture
def pet_store() -> dict:
    # Fresh copy per test so tests can mutate it.
    return json.loads(json.dumps(PET_STORE))


@pytest.fixture
def pet_store_yaml() -> str:
    return PET_STORE_YAML
