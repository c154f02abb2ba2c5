"""
Tests for the mdast node model and the tree walker.
"""

from code_repls.markdown.nodes import Node, map_tree


MDAST = {
    "type": "root",
    "children": [
        {
            "type": "heading",
            "depth": 1,
            "children": [{"type": "text", "value": "Title"}],
        },
        {
            "type": "paragraph",
            "children": [
                {"type": "text", "value": "See "},
                {
                    "type": "link",
                    "url": "https://example.com",
                    "title": "Example",
                    "children": [{"type": "emphasis", "children": [{"type": "text", "value": "here"}]}],
                    "position": {"start": {"line": 3, "column": 5}},
                },
            ],
        },
        {"type": "code", "lang": "js", "value": "let a = 1"},
    ],
}


class TestNodeDict:

    def test_from_dict_models_known_fields(self):
        root = Node.from_dict(MDAST)
        link = root.children[1].children[1]
        assert link.type == "link"
        assert link.url == "https://example.com"
        assert link.title == "Example"
        assert link.position == {"start": {"line": 3, "column": 5}}

    def test_extra_properties_kept(self):
        root = Node.from_dict(MDAST)
        assert root.children[0].extra == {"depth": 1}
        assert root.children[2].extra == {"lang": "js"}

    def test_round_trip(self):
        assert Node.from_dict(MDAST).to_dict() == MDAST

    def test_leaf_has_no_children(self):
        code = Node.from_dict(MDAST).children[2]
        assert code.children is None
        assert "children" not in code.to_dict()


class TestNodeText:

    def test_nested_text(self):
        link = Node.from_dict(MDAST).children[1].children[1]
        assert link.text() == "here"

    def test_leaf_text(self):
        assert Node(type="text", value="plain").text() == "plain"

    def test_empty(self):
        assert Node(type="paragraph", children=[]).text() == ""


class TestMapTree:

    def test_identity_preserves_structure(self):
        root = Node.from_dict(MDAST)
        assert map_tree(root, lambda node, index, parent: node) == root

    def test_preorder_visits_each_node_once(self):
        root = Node.from_dict(MDAST)
        visited = []

        def visitor(node, index, parent):
            visited.append(node.type if node.value is None else node.value)
            return node

        map_tree(root, visitor)
        assert visited == [
            "root", "heading", "Title", "paragraph", "See ", "link", "emphasis", "here", "let a = 1",
        ]

    def test_index_and_parent(self):
        root = Node.from_dict(MDAST)
        seen = {}

        def visitor(node, index, parent):
            seen[node.type] = (index, parent.type if parent else None)
            return node

        map_tree(root, visitor)
        assert seen["root"] == (None, None)
        assert seen["code"] == (2, "root")
        assert seen["link"] == (1, "paragraph")

    def test_replacement_used_in_output(self):
        root = Node.from_dict(MDAST)

        def visitor(node, index, parent):
            if node.type == "link":
                return Node(type="html", value="<a>x</a>")
            return node

        result = map_tree(root, visitor)
        assert result.children[1].children[1] == Node(type="html", value="<a>x</a>")
        # the emphasis inside the replaced link is gone
        assert all(node.type != "emphasis" for node in result.depth_first())

    def test_input_not_modified(self):
        root = Node.from_dict(MDAST)
        map_tree(root, lambda node, index, parent: Node(type="thematicBreak"))
        assert root.to_dict() == MDAST
