# Copyright 2023 Petuum, Inc. All Rights Reserved.
import yaml

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class ManifestLoader(yaml.SafeLoader):
    """Safe loader that keeps timestamps as the strings they were written as"""


ManifestLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class ManifestDumper(yaml.SafeDumper):
    """Safe dumper that never emits anchors, each document is written out in full"""
    def ignore_aliases(self, data):
        return True


# from https://stackoverflow.com/a/33300001
def str_presenter(dumper, data):
    if len(data.splitlines()) > 1:  # check for multiline string
        return dumper.represent_scalar('tag:yaml.org,2002:str', data, style='|')
    return dumper.represent_scalar('tag:yaml.org,2002:str', data)


ManifestDumper.add_representer(str, str_presenter)


def load_manifest(document):
    return yaml.load(document, Loader=ManifestLoader)


def dump_manifest(obj):
    """
    Serialize one manifest deterministically: keys sorted, block style,
    no line folding.
    """
    return yaml.dump(obj, Dumper=ManifestDumper, default_flow_style=False,
                     sort_keys=True, allow_unicode=True, width=float("inf"))
