import unittest

from jabberkit.builder import E
from jabberkit.builder import parse_element
from jabberkit.elements import Base


class ElementTest(unittest.TestCase):

    def test_e_builder(self):
        parsed = parse_element('<a xmlns="j:a"><b/><c xmlns="j:c"/></a>')
        build = E('a', namespace='j:a')
        build.add_tag('b')
        build.add_tag('c', namespace='j:c')

        self.assertIsInstance(build, Base)
        self.assertEqual(parsed.tag, build.tag)
        self.assertEqual(parsed.nsmap, build.nsmap)

        for x in range(2):
            self.assertEqual(parsed[x].tag, build[x].tag)

    def test_e_builder_text_and_attrs(self):
        element = E('a', text='hello', namespace='j:a', id='1')
        self.assertEqual(element.text, 'hello')
        self.assertEqual(element.get('id'), '1')
        self.assertEqual(element.localname, 'a')
        self.assertEqual(element.namespace, 'j:a')

    def test_find_tag(self):
        element = parse_element('<a xmlns="j:a"><b/><c xmlns="j:c"/></a>')

        self.assertIsNotNone(element.find_tag('b'))
        self.assertIsNotNone(element.find_tag('b', namespace='j:a'))
        self.assertTrue(element.has_tag('b'))

        self.assertIsNone(element.find_tag('c'))
        self.assertIsNone(element.find_tag('c', namespace='j:a'))
        self.assertIsNotNone(element.find_tag('c', namespace='j:c'))

    def test_add_tag(self):
        element = E('a', namespace='j:a')
        element.add_tag('b', namespace='j:b')

        self.assertIsNone(element.find_tag('b'))

        element_b = element.find_tag('b', namespace='j:b')
        self.assertEqual(element_b.tag, '{j:b}b')
        self.assertIsInstance(element_b, Base)

        element = E('a', namespace='j:a')
        element.add_tag('b')

        element_b = element.find_tag('b')
        self.assertEqual(element_b.tag, '{j:a}b')
        self.assertEqual(element_b.namespace, 'j:a')

    def test_add_tag_text(self):
        element = E('a', namespace='j:a')
        element.add_tag_text('b', 'test')
        element.add_tag_text('b', 'replaced')

        self.assertEqual(len(element.find_tags('b')), 1)
        self.assertEqual(element.find_tag_text('b'), 'replaced')
        self.assertIsNone(element.find_tag_text('c'))

    def test_set_tag_text(self):
        element = E('a', namespace='j:a')
        element.set_tag_text('b', 'test')
        self.assertEqual(element.find_tag_text('b'), 'test')

        element.set_tag_text('b', None)
        self.assertFalse(element.has_tag('b'))

    def test_remove_tag(self):
        element = parse_element('<a xmlns="j:a"><b/><b/><c/></a>')

        removed = element.remove_tag('c')
        self.assertEqual(removed.localname, 'c')
        self.assertIsNone(element.remove_tag('c'))

        element.remove_tags('b')
        self.assertEqual(element.get_children(), [])

    def test_no_namespace(self):
        element = E('a')
        element.add_tag_text('b', 'one')
        element.add_tag_text('b', 'two')

        self.assertEqual(len(element.get_children()), 1)
        self.assertEqual(element.find_tag_text('b'), 'two')
        self.assertTrue(element.has_tag('b'))
        self.assertEqual(len(element.find_tags('b')), 1)
        self.assertEqual(element.tostring(), '<a><b>two</b></a>')

        element.set_tag_text('b', None)
        self.assertFalse(element.has_tag('b'))
        self.assertEqual(element.tostring(), '<a/>')

        element = parse_element('<a><b/><c/></a>')
        self.assertIsNotNone(element.find_tag('b'))
        self.assertIsNotNone(element.remove_tag('c'))
        self.assertEqual(element.tostring(), '<a><b/></a>')

    def test_tostring(self):
        element = E('a', namespace='j:a')
        self.assertEqual(element.tostring(), '<a xmlns="j:a"/>')
        self.assertEqual(str(element), '<a xmlns="j:a"/>')


if __name__ == '__main__':
    unittest.main()
