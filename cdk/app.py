#!/usr/bin/env python3

import logging

from aws_cdk import (
    App,
    Tags,
)

from jenkins_cdk.config import config, environment
from jenkins_cdk.jenkins_stack import JenkinsStack
from jenkins_cdk.jenkins_agent_stack import JenkinsMacAgentStack


def build_app(app: App, env=None):
    stack_name = config['DEFAULT']['stack_name']

    jenkins = JenkinsStack(app, stack_name + 'Stack', env=env)
    # The agent joins the controller's VPC and security group, so it comes second
    jenkins_agent = JenkinsMacAgentStack(app, stack_name + 'MacAgentStack', controller=jenkins, env=env)

    Tags.of(app).add(key='Name', value=stack_name)
    Tags.of(app).add(key='Department', value=config['DEFAULT']['department'])
    Tags.of(app).add(key='DevTeam', value=config['DEFAULT']['dev_team'])
    Tags.of(app).add(key='Environment', value=config['DEFAULT']['environment'])

    return jenkins, jenkins_agent


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    app = App()
    build_app(app, env=environment())
    app.synth()
