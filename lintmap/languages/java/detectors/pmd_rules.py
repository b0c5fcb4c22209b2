"""Catalog of PMD Java rules, keyed by category.

Rule IDs come in two forms:

  short           UnusedLocalVariable
  fully-qualified category/java/bestpractices.xml/UnusedLocalVariable

The short form is what PMD prints in the ``Rule`` column of its CSV report;
the fully-qualified form is what a ruleset file references.
"""

from __future__ import annotations

PMD_CATEGORIES: tuple[str, ...] = (
    "bestpractices",
    "codestyle",
    "design",
    "documentation",
    "errorprone",
    "multithreading",
    "performance",
    "security",
)

_CATEGORY_PREFIX = "category/java/"

RULES_BY_CATEGORY: dict[str, tuple[str, ...]] = {
    "bestpractices": (
        "AbstractClassWithoutAbstractMethod",
        "AccessorClassGeneration",
        "AccessorMethodGeneration",
        "ArrayIsStoredDirectly",
        "AvoidMessageDigestField",
        "AvoidPrintStackTrace",
        "AvoidReassigningCatchVariables",
        "AvoidReassigningLoopVariables",
        "AvoidReassigningParameters",
        "AvoidStringBufferField",
        "AvoidUsingHardCodedIP",
        "CheckResultSet",
        "ConstantsInInterface",
        "DefaultLabelNotLastInSwitchStmt",
        "DoubleBraceInitialization",
        "ForLoopCanBeForeach",
        "ForLoopVariableCount",
        "GuardLogStatement",
        "JUnit4SuitesShouldUseSuiteAnnotation",
        "JUnit4TestShouldUseAfterAnnotation",
        "JUnit4TestShouldUseBeforeAnnotation",
        "JUnit4TestShouldUseTestAnnotation",
        "JUnit5TestShouldBePackagePrivate",
        "JUnitAssertionsShouldIncludeMessage",
        "JUnitTestContainsTooManyAsserts",
        "JUnitTestsShouldIncludeAssert",
        "JUnitUseExpected",
        "LiteralsFirstInComparisons",
        "LooseCoupling",
        "MethodReturnsInternalArray",
        "MissingOverride",
        "OneDeclarationPerLine",
        "PositionLiteralsFirstInCaseInsensitiveComparisons",
        "PositionLiteralsFirstInComparisons",
        "PreserveStackTrace",
        "PrimitiveWrapperInstantiation",
        "ReplaceEnumerationWithIterator",
        "ReplaceHashtableWithMap",
        "ReplaceVectorWithList",
        "SimplifiableTestAssertion",
        "SwitchStmtsShouldHaveDefault",
        "SystemPrintln",
        "UnusedAssignment",
        "UnusedFormalParameter",
        "UnusedImports",
        "UnusedLocalVariable",
        "UnusedPrivateField",
        "UnusedPrivateMethod",
        "UseAssertEqualsInsteadOfAssertTrue",
        "UseAssertNullInsteadOfAssertTrue",
        "UseAssertSameInsteadOfAssertTrue",
        "UseAssertTrueInsteadOfAssertEquals",
        "UseCollectionIsEmpty",
        "UseStandardCharsets",
        "UseTryWithResources",
        "UseVarargs",
        "WhileLoopWithLiteralBoolean",
    ),
    "codestyle": (
        "AbstractNaming",
        "AtLeastOneConstructor",
        "AvoidDollarSigns",
        "AvoidFinalLocalVariable",
        "AvoidPrefixingMethodParameters",
        "AvoidProtectedFieldInFinalClass",
        "AvoidProtectedMethodInFinalClassNotExtending",
        "AvoidUsingNativeCode",
        "BooleanGetMethodName",
        "CallSuperInConstructor",
        "ClassNamingConventions",
        "CommentDefaultAccessModifier",
        "ConfusingTernary",
        "ControlStatementBraces",
        "DefaultPackage",
        "DontImportJavaLang",
        "DuplicateImports",
        "EmptyMethodInAbstractClassShouldBeAbstract",
        "ExtendsObject",
        "FieldDeclarationsShouldBeAtStartOfClass",
        "FieldNamingConventions",
        "ForLoopShouldBeWhileLoop",
        "ForLoopsMustUseBraces",
        "FormalParameterNamingConventions",
        "GenericsNaming",
        "IdenticalCatchBranches",
        "IfElseStmtsMustUseBraces",
        "IfStmtsMustUseBraces",
        "LinguisticNaming",
        "LocalHomeNamingConvention",
        "LocalInterfaceSessionNamingConvention",
        "LocalVariableCouldBeFinal",
        "LocalVariableNamingConventions",
        "LongVariable",
        "MDBAndSessionBeanNamingConvention",
        "MethodArgumentCouldBeFinal",
        "MethodNamingConventions",
        "MIsLeadingVariableName",
        "NoPackage",
        "OnlyOneReturn",
        "PackageCase",
        "PrematureDeclaration",
        "RemoteInterfaceNamingConvention",
        "RemoteSessionInterfaceNamingConvention",
        "ShortClassName",
        "ShortMethodName",
        "ShortVariable",
        "SuspiciousConstantFieldName",
        "TooManyStaticImports",
        "UnnecessaryAnnotationValueElement",
        "UnnecessaryCast",
        "UnnecessaryConstructor",
        "UnnecessaryFullyQualifiedName",
        "UnnecessaryImport",
        "UnnecessaryLocalBeforeReturn",
        "UnnecessaryModifier",
        "UnnecessaryReturn",
        "UnnecessarySemicolon",
        "UseDiamondOperator",
        "UselessParentheses",
        "UselessQualifiedThis",
        "UseShortArrayInitializer",
        "UseUnderscoresInNumericLiterals",
        "VariableNamingConventions",
        "WhileLoopsMustUseBraces",
    ),
    "design": (
        "AbstractClassWithoutAnyMethod",
        "AvoidCatchingGenericException",
        "AvoidDeeplyNestedIfStmts",
        "AvoidRethrowingException",
        "AvoidThrowingNewInstanceOfSameException",
        "AvoidThrowingNullPointerException",
        "AvoidThrowingRawExceptionTypes",
        "AvoidUncheckedExceptionsInSignatures",
        "ClassWithOnlyPrivateConstructorsShouldBeFinal",
        "CognitiveComplexity",
        "CollapsibleIfStatements",
        "CouplingBetweenObjects",
        "CyclomaticComplexity",
        "DataClass",
        "DoNotExtendJavaLangError",
        "ExceptionAsFlowControl",
        "ExcessiveClassLength",
        "ExcessiveImports",
        "ExcessiveMethodLength",
        "ExcessiveParameterList",
        "ExcessivePublicCount",
        "FinalFieldCouldBeStatic",
        "GodClass",
        "ImmutableField",
        "InvalidJavaBean",
        "LawOfDemeter",
        "LogicInversion",
        "LoosePackageCoupling",
        "ModifiedCyclomaticComplexity",
        "MutableStaticState",
        "NcssConstructorCount",
        "NcssCount",
        "NcssMethodCount",
        "NcssTypeCount",
        "NPathComplexity",
        "SignatureDeclareThrowsException",
        "SimplifiedTernary",
        "SimplifyBooleanAssertion",
        "SimplifyBooleanExpressions",
        "SimplifyBooleanReturns",
        "SimplifyConditional",
        "SingularField",
        "StdCyclomaticComplexity",
        "SwitchDensity",
        "TooManyFields",
        "TooManyMethods",
        "UselessOverridingMethod",
        "UseObjectForClearerAPI",
        "UseUtilityClass",
    ),
    "documentation": (
        "CommentContent",
        "CommentRequired",
        "CommentSize",
        "UncommentedEmptyConstructor",
        "UncommentedEmptyMethodBody",
    ),
    "errorprone": (
        "AssignmentInOperand",
        "AssignmentToNonFinalStatic",
        "AvoidAccessibilityAlteration",
        "AvoidAssertAsIdentifier",
        "AvoidBranchingStatementAsLastInLoop",
        "AvoidCallingFinalize",
        "AvoidCatchingNPE",
        "AvoidCatchingThrowable",
        "AvoidDecimalLiteralsInBigDecimalConstructor",
        "AvoidDuplicateLiterals",
        "AvoidEnumAsIdentifier",
        "AvoidFieldNameMatchingMethodName",
        "AvoidFieldNameMatchingTypeName",
        "AvoidInstanceofChecksInCatchClause",
        "AvoidLiteralsInIfCondition",
        "AvoidLosingExceptionInformation",
        "AvoidMultipleUnaryOperators",
        "AvoidUsingOctalValues",
        "BadComparison",
        "BeanMembersShouldSerialize",
        "BrokenNullCheck",
        "CallSuperFirst",
        "CallSuperLast",
        "CheckSkipResult",
        "ClassCastExceptionWithToArray",
        "CloneMethodMustBePublic",
        "CloneMethodMustImplementCloneable",
        "CloneMethodReturnTypeMustMatchClassName",
        "CloneThrowsCloneNotSupportedException",
        "CloseResource",
        "CompareObjectsWithEquals",
        "ComparisonWithNaN",
        "ConstructorCallsOverridableMethod",
        "DataflowAnomalyAnalysis",
        "DetachedTestCase",
        "DoNotCallGarbageCollectionExplicitly",
        "DoNotCallSystemExit",
        "DoNotExtendJavaLangThrowable",
        "DoNotHardCodeSDCard",
        "DoNotTerminateVM",
        "DoNotThrowExceptionInFinally",
        "DontImportSun",
        "DontUseFloatTypeForLoopIndices",
        "EmptyCatchBlock",
        "EmptyFinalizer",
        "EmptyFinallyBlock",
        "EmptyIfStmt",
        "EmptyInitializer",
        "EmptyStatementBlock",
        "EmptyStatementNotInLoop",
        "EmptySwitchStatements",
        "EmptySynchronizedBlock",
        "EmptyTryBlock",
        "EmptyWhileStmt",
        "EqualsNull",
        "FinalizeDoesNotCallSuperFinalize",
        "FinalizeOnlyCallsSuperFinalize",
        "FinalizeOverloaded",
        "FinalizeShouldBeProtected",
        "IdempotentOperations",
        "ImplicitSwitchFallThrough",
        "ImportFromSamePackage",
        "InstantiationToGetClass",
        "InvalidLogMessageFormat",
        "InvalidSlf4jMessageFormat",
        "JumbledIncrementer",
        "JUnitSpelling",
        "JUnitStaticSuite",
        "MethodWithSameNameAsEnclosingClass",
        "MisplacedNullCheck",
        "MissingBreakInSwitch",
        "MissingSerialVersionUID",
        "MissingStaticMethodInNonInstantiatableClass",
        "MoreThanOneLogger",
        "NonCaseLabelInSwitchStatement",
        "NonStaticInitializer",
        "NullAssignment",
        "OverrideBothEqualsAndHashcode",
        "ProperCloneImplementation",
        "ProperLogger",
        "ReturnEmptyArrayRatherThanNull",
        "ReturnEmptyCollectionRatherThanNull",
        "ReturnFromFinallyBlock",
        "SimpleDateFormatNeedsLocale",
        "SingleMethodSingleton",
        "SingletonClassReturningNewInstance",
        "StaticEJBFieldShouldBeFinal",
        "StringBufferInstantiationWithChar",
        "SuspiciousEqualsMethodName",
        "SuspiciousHashcodeMethodName",
        "SuspiciousOctalEscape",
        "TestClassWithoutTestCases",
        "UnconditionalIfStatement",
        "UnnecessaryBooleanAssertion",
        "UnnecessaryCaseChange",
        "UnnecessaryConversionTemporary",
        "UnusedNullCheckInEquals",
        "UseCorrectExceptionLogging",
        "UseEqualsToCompareStrings",
        "UselessOperationOnImmutable",
        "UseLocaleWithCaseConversions",
        "UseProperClassLoader",
    ),
    "multithreading": (
        "AvoidSynchronizedAtMethodLevel",
        "AvoidThreadGroup",
        "AvoidUsingVolatile",
        "DoNotUseThreads",
        "DontCallThreadRun",
        "DoubleCheckedLocking",
        "NonThreadSafeSingleton",
        "UnsynchronizedStaticDateFormatter",
        "UnsynchronizedStaticFormatter",
        "UseConcurrentHashMap",
        "UseNotifyAllInsteadOfNotify",
    ),
    "performance": (
        "AddEmptyString",
        "AppendCharacterWithChar",
        "AvoidArrayLoops",
        "AvoidCalendarDateCreation",
        "AvoidFileStream",
        "AvoidInstantiatingObjectsInLoops",
        "AvoidUsingShortType",
        "BigIntegerInstantiation",
        "BooleanInstantiation",
        "ByteInstantiation",
        "ConsecutiveAppendsShouldReuse",
        "ConsecutiveLiteralAppends",
        "InefficientEmptyStringCheck",
        "InefficientStringBuffering",
        "InsufficientStringBufferDeclaration",
        "IntegerInstantiation",
        "LongInstantiation",
        "OptimizableToArrayCall",
        "RedundantFieldInitializer",
        "ShortInstantiation",
        "SimplifyStartsWith",
        "StringInstantiation",
        "StringToString",
        "TooFewBranchesForASwitchStatement",
        "UnnecessaryWrapperObjectCreation",
        "UseArrayListInsteadOfVector",
        "UseArraysAsList",
        "UseIndexOfChar",
        "UselessStringValueOf",
        "UseStringBufferForStringAppends",
        "UseStringBufferLength",
    ),
    "security": (
        "HardCodedCryptoKey",
        "InsecureCryptoIv",
    ),
}

_CATEGORY_BY_RULE: dict[str, str] = {
    rule: category
    for category, rules in RULES_BY_CATEGORY.items()
    for rule in rules
}

ALL_RULES: list[str] = [
    rule for category in PMD_CATEGORIES for rule in RULES_BY_CATEGORY[category]
]


def category_ruleset(category: str) -> str:
    """Ruleset path PMD accepts for a whole category."""
    return f"{_CATEGORY_PREFIX}{category}.xml"


def rule_category(short_id: str) -> str | None:
    return _CATEGORY_BY_RULE.get(short_id)


def make_short_rule_id(ref: str) -> str:
    """``category/java/design.xml/GodClass`` -> ``GodClass``."""
    return ref.rsplit("/", 1)[-1]


def make_full_rule_id(rule_id: str) -> str:
    """``GodClass`` -> ``category/java/design.xml/GodClass``.

    Already fully-qualified IDs pass through unchanged. Raises KeyError for a
    short ID missing from the catalog.
    """
    if rule_id.startswith(_CATEGORY_PREFIX):
        return rule_id
    category = _CATEGORY_BY_RULE[rule_id]
    return f"{category_ruleset(category)}/{rule_id}"


def expand_rule_ref(ref: str) -> list[str]:
    """Short rule IDs enabled by one ``<rule ref="...">`` of a ruleset file.

    A whole-category reference (``category/java/design.xml``) enables every
    rule in that category.
    """
    ref = ref.strip()
    if ref.startswith(_CATEGORY_PREFIX) and ref.endswith(".xml"):
        category = ref[len(_CATEGORY_PREFIX):-len(".xml")]
        if category in RULES_BY_CATEGORY:
            return list(RULES_BY_CATEGORY[category])
    return [make_short_rule_id(ref)]


__all__ = [
    "ALL_RULES",
    "PMD_CATEGORIES",
    "RULES_BY_CATEGORY",
    "category_ruleset",
    "expand_rule_ref",
    "make_full_rule_id",
    "make_short_rule_id",
    "rule_category",
]
