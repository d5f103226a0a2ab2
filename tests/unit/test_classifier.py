# =============================================================================
# TESTES - Content Classifier
# =============================================================================
# Testes unitários para seleção de questões por palavras-chave
# =============================================================================

import pytest


class TestDetectTopics:
    """Testes para detecção de tópicos."""

    def test_detects_data_structures(self):
        """Verifica gatilhos stack/queue."""
        from quizify.engine import ContentClassifier

        topics = ContentClassifier().detect_topics("This course covers stack and queue")

        assert topics == ["Data Structures"]

    def test_case_insensitive(self):
        from quizify.engine import ContentClassifier

        topics = ContentClassifier().detect_topics("MACHINE LEARNING and SQL")

        assert topics == ["Database", "AI/ML"]

    def test_table_order(self):
        """Verifica que a ordem segue a tabela, não o texto."""
        from quizify.engine import ContentClassifier

        topics = ContentClassifier().detect_topics("algorithms before programming")

        assert topics == ["Programming", "Algorithms"]

    def test_detection_only_topics(self):
        """Verifica tópicos detectados sem questões modelo."""
        from quizify.engine import ContentClassifier

        topics = ContentClassifier().detect_topics("network security basics")

        assert topics == ["Networks", "Security"]

    def test_no_topics(self):
        from quizify.engine import ContentClassifier

        assert ContentClassifier().detect_topics("cooking with herbs") == []

    def test_detection_table_is_wider_than_triggers(self):
        """Verifica que "sorting" e "big o" detectam Algorithms sem incluir questões."""
        from quizify.engine import ContentClassifier

        classifier = ContentClassifier()
        text = "sorting and big o complexity"

        assert classifier.detect_topics(text) == ["Algorithms"]
        assert len(classifier.classify(text)) == 3

    def test_question_only_trigger_not_reported(self):
        """Verifica que "computer science" inclui questão mas não é tópico detectado."""
        from quizify.engine import ContentClassifier

        classifier = ContentClassifier()

        assert classifier.detect_topics("Intro to Computer Science") == []
        assert len(classifier.classify("Intro to Computer Science")) == 4


class TestClassify:
    """Testes para seleção das questões candidatas."""

    def test_stack_queue_scenario(self):
        """Verifica 2 questões de Data Structures + 3 de preenchimento."""
        from quizify.engine import ContentClassifier

        questions = ContentClassifier().classify("This course covers stack and queue")

        assert len(questions) == 5
        assert [q.type for q in questions[-3:]] == ["true-false", "true-false", "short-answer"]
        assert "LIFO" in questions[0].question

    def test_empty_text_returns_fillers(self):
        """Verifica que as questões de preenchimento entram sempre."""
        from quizify.engine import ContentClassifier

        questions = ContentClassifier().classify("")

        assert len(questions) == 3
        assert sum(q.points for q in questions) == 5

    def test_multiple_topics(self):
        from quizify.engine import ContentClassifier

        questions = ContentClassifier().classify("Programming with SQL")

        # Programming (2) + Database (1) + preenchimento (3)
        assert len(questions) == 6

    def test_detection_only_topics_add_no_questions(self):
        from quizify.engine import ContentClassifier

        questions = ContentClassifier().classify("network security")

        assert len(questions) == 3

    def test_sample_text_triggers_all_topics(self):
        from quizify.engine import ContentClassifier
        from quizify.templates import SAMPLE_COURSE_TEXT

        classifier = ContentClassifier()

        assert len(classifier.detect_topics(SAMPLE_COURSE_TEXT)) == 8
        assert len(classifier.classify(SAMPLE_COURSE_TEXT)) == 14

    def test_fresh_ids_per_call(self):
        """Verifica IDs novos a cada classificação, conteúdo determinístico."""
        from quizify.engine import ContentClassifier

        classifier = ContentClassifier()
        first = classifier.classify("stack")
        second = classifier.classify("stack")

        assert [q.question for q in first] == [q.question for q in second]
        assert {q.id for q in first}.isdisjoint({q.id for q in second})

    def test_templates_not_mutated(self):
        from quizify.engine import ContentClassifier
        from quizify.templates import FILLER_QUESTIONS

        ContentClassifier().classify("stack")

        assert all("id" not in template for template in FILLER_QUESTIONS)


class TestAddTopic:
    """Testes para extensão da tabela."""

    def test_add_topic(self):
        from quizify.engine import ContentClassifier

        classifier = ContentClassifier()
        classifier.add_topic(
            "Compilers",
            ["Parser"],
            [{"type": "true-false", "question": "Parsers build ASTs.", "correct_answer": 0, "points": 1}],
        )

        assert "Compilers" in classifier.detect_topics("writing a parser")
        assert len(classifier.classify("writing a parser")) == 4

    def test_add_topic_isolated_per_instance(self):
        from quizify.engine import ContentClassifier

        first = ContentClassifier()
        first.add_topic("Compilers", ["parser"], [])

        assert "Compilers" not in ContentClassifier().detect_topics("parser")

    def test_invalid_template_raises(self):
        from pydantic import ValidationError

        from quizify.engine import ContentClassifier

        classifier = ContentClassifier()
        classifier.add_topic("Broken", ["broken"], [{"type": "mcq", "question": "?", "points": 1}])

        with pytest.raises(ValidationError):
            classifier.classify("broken")
