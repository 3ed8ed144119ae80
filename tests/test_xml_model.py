import unittest

from nodexml import MissingNameError, XmlElement, XmlText, to_node


class ToNodeTest(unittest.TestCase):
    def test_mapping_becomes_element_with_coerced_children(self) -> None:
        node = to_node({"name": "p", "attributes": {"id": "x"}, "children": [{"name": "b"}, "text", 3]})
        self.assertIsInstance(node, XmlElement)
        self.assertEqual(node.name, "p")
        self.assertEqual(node.attributes, {"id": "x"})
        self.assertEqual(node.children, [XmlElement(name="b"), XmlText("text"), XmlText(3)])

    def test_scalars_become_text(self) -> None:
        for value in ("s", 1, 2.5, True, None):
            self.assertEqual(to_node(value), XmlText(value))

    def test_typed_nodes_pass_through(self) -> None:
        text = XmlText("t")
        element = XmlElement(name="e")
        self.assertIs(to_node(text), text)
        self.assertIs(to_node(element), element)

    def test_missing_name_is_a_construction_error(self) -> None:
        with self.assertRaises(MissingNameError):
            to_node({"attributes": {"a": "b"}})
        with self.assertRaises(MissingNameError):
            XmlElement(name="")
        with self.assertRaises(MissingNameError):
            to_node({"name": 7})

    def test_lone_child_values_are_wrapped(self) -> None:
        self.assertEqual(to_node({"name": "p", "children": "hi"}).children, [XmlText("hi")])
        self.assertEqual(
            to_node({"name": "p", "children": {"name": "b"}}).children,
            [XmlElement(name="b")],
        )

    def test_non_mapping_attributes_are_ignored(self) -> None:
        self.assertEqual(to_node({"name": "p", "attributes": "junk"}).attributes, {})
        self.assertEqual(to_node({"name": "p", "attributes": None}).attributes, {})

    def test_source_children_list_is_copied(self) -> None:
        children = ["a"]
        element = XmlElement(name="p", children=children)
        element.children.append(XmlText("b"))
        self.assertEqual(children, ["a"])

    def test_deep_mapping_tree_converts_without_recursion_limit(self) -> None:
        depth = 3_000
        tree = {"name": "leaf", "children": ["end"]}
        for i in range(depth):
            tree = {"name": "n", "attributes": {"i": i}, "children": [tree, "t"]}
        node = to_node(tree)
        for i in reversed(range(depth)):
            self.assertEqual(node.attributes, {"i": i})
            self.assertEqual(node.children[1], XmlText("t"))
            node = node.children[0]
        self.assertEqual(node.name, "leaf")
        self.assertEqual(node.children, [XmlText("end")])

    def test_missing_name_deep_in_the_tree_is_found(self) -> None:
        tree = {"children": ["bottom"]}
        for _ in range(1_500):
            tree = {"name": "n", "children": [tree]}
        with self.assertRaises(MissingNameError):
            to_node(tree)


if __name__ == "__main__":
    unittest.main()
