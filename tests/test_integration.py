"""End-to-end encoding of configuration documents."""

import pytest
import yaml

from to_yaml import Symbol, encode


def _plain(tree):
    """Same tree with Symbol keys replaced by their names."""
    if isinstance(tree, dict):
        return {str(k): _plain(v) for k, v in tree.items()}
    if isinstance(tree, list):
        return [_plain(v) for v in tree]
    return tree


SIMPLE = {"hello": "world", Symbol("foo"): "bar"}
SIMPLE_YAML = "hello: world\nfoo: bar\n"

NESTED = {Symbol("hello"): {Symbol("world"): "earth", "yeah": "boi"}}
NESTED_YAML = "hello:\n  world: earth\n  yeah: boi\n"

LIST = {
    Symbol("list"): [
        {Symbol("key"): "value", Symbol("sub"): "yeah"},
        {Symbol("keytwo"): "valuetwo", Symbol("sub"): "wooo"},
    ]
}
LIST_YAML = (
    "list:\n"
    "  - key: value\n"
    "    sub: yeah\n"
    "  - keytwo: valuetwo\n"
    "    sub: wooo\n"
)

KUBE_SERVICE = {
    Symbol("apiVersion"): "v1",
    Symbol("kind"): "Service",
    Symbol("metadata"): {Symbol("name"): "fancy-name"},
    Symbol("spec"): {
        Symbol("ports"): [{Symbol("port"): 80, Symbol("targetPort"): 3000}],
        Symbol("selector"): {Symbol("app"): "fancy-name"},
    },
}
KUBE_SERVICE_YAML = (
    "apiVersion: v1\n"
    "kind: Service\n"
    "metadata:\n"
    "  name: fancy-name\n"
    "spec:\n"
    "  ports:\n"
    "    - port: 80\n"
    "      targetPort: 3000\n"
    "  selector:\n"
    "    app: fancy-name\n"
)

KUBE_DEPLOYMENT = {
    "apiVersion": "apps/v1",
    "kind": "Deployment",
    "metadata": {"name": "web", "labels": {"app": "web"}},
    "spec": {
        "replicas": 3,
        "template": {
            "spec": {
                "containers": [
                    {
                        "name": "web",
                        "image": "nginx:1.25",
                        "args": ["--verbose", "--color"],
                        "env": [
                            {"name": "MODE", "value": "production ready"},
                            {"name": "RATIO", "value": 0.5},
                        ],
                    }
                ]
            }
        },
    },
}


@pytest.mark.parametrize(
    "tree, expected",
    [
        (SIMPLE, SIMPLE_YAML),
        (NESTED, NESTED_YAML),
        (LIST, LIST_YAML),
        (KUBE_SERVICE, KUBE_SERVICE_YAML),
    ],
    ids=["simple", "nested", "list", "kube_service"],
)
def test_fixture_output(tree, expected):
    assert encode(tree) == expected


@pytest.mark.parametrize(
    "tree", [SIMPLE, NESTED, LIST, KUBE_SERVICE, KUBE_DEPLOYMENT],
    ids=["simple", "nested", "list", "kube_service", "kube_deployment"],
)
def test_output_is_loadable_yaml(tree):
    assert yaml.safe_load(encode(tree)) == _plain(tree)


def test_port_is_plain_number():
    out = encode({Symbol("port"): 80})
    assert out == "port: 80\n"
    assert yaml.safe_load(out) == {"port": 80}


def test_quoted_values_load_as_strings():
    out = encode({"image": "nginx:1.25", "cmd": "run server"})
    assert out == 'image: "nginx:1.25"\ncmd: "run server"\n'
    assert yaml.safe_load(out) == {"image": "nginx:1.25", "cmd": "run server"}
