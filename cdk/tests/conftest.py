import pytest
from aws_cdk import App, Environment

from jenkins_cdk.jenkins_agent_stack import JenkinsMacAgentStack
from jenkins_cdk.jenkins_stack import JenkinsStack

TEST_ENV = Environment(account="123456789012", region="us-east-1")


@pytest.fixture
def app():
    return App()


@pytest.fixture
def jenkins_stack(app):
    return JenkinsStack(app, "JenkinsStack", env=TEST_ENV)


@pytest.fixture
def agent_stack(app, jenkins_stack):
    return JenkinsMacAgentStack(app, "JenkinsMacAgentStack", controller=jenkins_stack, env=TEST_ENV)
