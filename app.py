#!/usr/bin/env python3

import aws_cdk as cdk

from cinema_tickets_stack import CinemaTicketsStack

app = cdk.App()
CinemaTicketsStack(
    app,
    "CinemaTicketsStack",
)

app.synth()
