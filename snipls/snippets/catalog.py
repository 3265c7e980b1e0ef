"""Static React and React Native snippets offered on every completion."""

from ..lsp.types import CompletionItem, CompletionItemKind, InsertTextFormat


def _snippet(
    label: str,
    documentation: str,
    insert_text: str,
    sort_text: str,
    kind: CompletionItemKind = CompletionItemKind.Snippet,
) -> CompletionItem:
    return CompletionItem(
        label=label,
        documentation=documentation,
        insertText=insert_text,
        insertTextFormat=InsertTextFormat.Snippet,
        kind=kind,
        sortText=sort_text,
    )


def _component(label: str, documentation: str, insert_text: str, sort_text: str) -> CompletionItem:
    return CompletionItem(
        label=label,
        documentation=documentation,
        insertText=insert_text,
        kind=CompletionItemKind.Class,
        sortText=sort_text,
    )


RN_FUNCTION_COMPONENT = """import { View, Text } from 'react-native';

const ${1:ComponentName} = () => {
  return (
    <View>
      <Text>${2:Hello World}</Text>
    </View>
  );
};"""

RN_STYLED_COMPONENT = """import { View, Text, StyleSheet } from 'react-native';

const ${1:ComponentName} = () => {
  return (
    <View style={styles.container}>
      <Text>${2:Hello World}</Text>
    </View>
  );
};

const styles = StyleSheet.create({
  container: {
    flex: 1,
    justifyContent: 'center',
    alignItems: 'center',
  },
});"""

REACT_FUNCTION_COMPONENT = """const ${1:ComponentName} = () => {
  return (
    <div>
      ${2:Hello World}
    </div>
  );
};"""

REACT_NAMED_COMPONENT = """function ${1:ComponentName}() {
  return (
    <div>
      ${2:Hello World}
    </div>
  );
}

export default ${1:ComponentName};"""

USE_EFFECT = """useEffect(() => {
  ${1:// effect}
  return () => {
    ${2:// cleanup}
  };
}, [${3:dependencies}]);"""

CUSTOM_HOOK = """const use${1:CustomHook} = () => {
  const [${2:state}, set${2/(.*)/${1:/capitalize}/}] = useState(${3:null});

  return {
    ${2},
  };
};"""

NAVIGATOR = """import { createNativeStackNavigator } from '@react-navigation/native-stack';

const Stack = createNativeStackNavigator();

const ${1:AppNavigator} = () => {
  return (
    <Stack.Navigator>
      <Stack.Screen name="${2:Home}" component={${3:HomeScreen}} />
    </Stack.Navigator>
  );
};"""

STYLE_OBJECT = """{
  padding: ${1:10},
  backgroundColor: '${2:#fff}',
  borderRadius: ${3:8},
}"""


def get_static_snippets() -> list[CompletionItem]:
    return [
        # React Native components
        _snippet(
            "rnf",
            "React Native Function Component\nImports: View, Text from react-native",
            RN_FUNCTION_COMPONENT,
            "1000",
        ),
        _snippet(
            "rnfe",
            "React Native Function Component (Exported)\nImports: View, Text from react-native",
            RN_FUNCTION_COMPONENT.replace("\nconst ", "\nexport const ", 1),
            "1001",
        ),
        _snippet(
            "rnfs",
            "React Native Function Component with StyleSheet",
            RN_STYLED_COMPONENT,
            "1002",
        ),
        # React components
        _snippet("rf", "React Function Component (default)", REACT_FUNCTION_COMPONENT, "1003"),
        _snippet(
            "rfe",
            "React Function Component (Exported)",
            "export " + REACT_FUNCTION_COMPONENT,
            "1004",
        ),
        _snippet("rfc", "React Function Component (Named)", REACT_NAMED_COMPONENT, "1005"),
        # Hooks
        _snippet(
            "useState",
            "React useState hook",
            "const [${1:state}, set${1/(.*)/${1:/capitalize}/}] = useState(${2:null});",
            "1006",
            kind=CompletionItemKind.Function,
        ),
        _snippet("useEffect", "React useEffect hook", USE_EFFECT, "1007", kind=CompletionItemKind.Function),
        # Basic components
        _component("View", 'React Native View component\nImport: { View } from "react-native"', "<View></View>", "1008"),
        _component("Text", 'React Native Text component\nImport: { Text } from "react-native"', "<Text></Text>", "1009"),
        _component(
            "StyleSheet",
            'React Native StyleSheet\nImport: { StyleSheet } from "react-native"',
            "StyleSheet",
            "1010",
        ),
        # Return blocks
        _snippet(
            "rnr",
            "React Native Return Statement",
            "return (\n  <View>\n    ${1:content}\n  </View>\n);",
            "0010",
        ),
        _snippet(
            "rr",
            "React Return Statement",
            "return (\n  <div>\n    ${1:content}\n  </div>\n);",
            "00011",
        ),
        # More hooks
        _snippet(
            "useCallback",
            "React useCallback hook",
            "const ${1:callback} = useCallback(() => {\n  ${2}\n}, [${3}]);",
            "1011",
            kind=CompletionItemKind.Function,
        ),
        _snippet(
            "useMemo",
            "React useMemo hook",
            "const ${1:memorizedValue} = useMemo(() => ${2:value}, [${3:dependencies}]);",
            "1012",
            kind=CompletionItemKind.Function,
        ),
        _snippet("useCustomHook", "Custom React hook boilerplate", CUSTOM_HOOK, "1013"),
        _snippet(
            "useCustomHookExport",
            "Custom React hook boilerplate (exported)",
            "export " + CUSTOM_HOOK,
            "1013",
        ),
        # Navigation and styles
        _snippet("rnnav", "React Navigation screen setup", NAVIGATOR, "1014"),
        _snippet("styleObj", "Inline Style object", STYLE_OBJECT, "1015"),
    ]
